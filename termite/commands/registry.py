"""Registry of command-bar commands with dispatch and completion."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

Handler = Callable[[str], Any]


@dataclass(frozen=True)
class Command:
    """A command that can be run from the command bar.

    ``handler`` receives the argument text and returns the message the
    command produces.
    """

    name: str
    description: str
    handler: Handler


@dataclass(frozen=True)
class CommandErrorMsg:
    """Produced when a command cannot be run as given."""

    command: str
    err: str


@dataclass(frozen=True)
class NavigateMsg:
    """Asks the application to switch to another page."""

    page: str
    kick_initial_sync: bool = False


class Registry:
    """Holds commands by name and runs them from command-bar input."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def register(self, command: Command) -> None:
        """Add ``command``, replacing any command of the same name."""
        self._commands[command.name] = command

    def dispatch(self, text: str) -> Any:
        """Run the command named at the start of ``text`` with the rest as arguments.

        Returns ``None`` for blank input and a :class:`CommandErrorMsg` for an
        unknown command; otherwise whatever the command's handler returns.
        """
        text = text.strip()
        if not text:
            return None
        if text[0] in ":/":
            text = text[1:]

        name, _, args = text.partition(" ")
        name = name.strip()
        args = args.strip()

        command = self._commands.get(name)
        if command is None:
            return CommandErrorMsg(command=name, err=f"unknown command: :{name}")
        return command.handler(args)

    def completions(self, prefix: str) -> list[Command]:
        """Return commands whose names start with ``prefix``, sorted by name."""
        prefix = prefix.removeprefix(":").removeprefix("/").lower()
        return sorted(
            (c for c in self._commands.values() if c.name.lower().startswith(prefix)),
            key=lambda c: c.name,
        )

    def all(self) -> list[Command]:
        """Return every registered command, sorted by name."""
        return sorted(self._commands.values(), key=lambda c: c.name)