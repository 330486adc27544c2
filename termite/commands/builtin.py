"""The built-in command-bar commands and the messages they produce."""

from __future__ import annotations

from dataclasses import dataclass

from termite.commands.registry import Command, CommandErrorMsg, NavigateMsg, Registry

_SLUG_CHARS = frozenset("abcdefghijklmnopqrstuvwxyz0123456789-")
_EXPORT_FORMATS = ("json", "csv")


@dataclass(frozen=True)
class SwitchAccountMsg:
    """Requests switching the active account."""

    account_id: str


@dataclass(frozen=True)
class ListAccountsMsg:
    """Requests a list of all accounts."""


@dataclass(frozen=True)
class OpenAccountPickerMsg:
    """Requests the account picker overlay."""


@dataclass(frozen=True)
class DaemonStatusMsg:
    """Requests the background daemon's status."""


@dataclass(frozen=True)
class DaemonStartMsg:
    """Requests starting the background daemon."""


@dataclass(frozen=True)
class DaemonStopMsg:
    """Requests stopping the background daemon."""


@dataclass(frozen=True)
class SwitchInboxMsg:
    """Requests switching the active split inbox."""

    inbox_name: str


@dataclass(frozen=True)
class CreateInboxMsg:
    """Requests creating a split inbox."""

    id: str
    label: str


@dataclass(frozen=True)
class DeleteInboxMsg:
    """Requests deleting a split inbox."""

    id: str


@dataclass(frozen=True)
class ListInboxesMsg:
    """Requests a list of split inboxes."""


@dataclass(frozen=True)
class MetricsExportMsg:
    """Requests exporting metrics; ``format`` is ``"json"`` or ``"csv"``."""

    format: str


@dataclass(frozen=True)
class SearchMsg:
    """Requests a full-text search."""

    query: str


@dataclass(frozen=True)
class ShortcutsMsg:
    """Requests the keybinding cheatsheet."""


@dataclass(frozen=True)
class ThemeChangeMsg:
    """Requests applying a theme by ID."""

    theme_id: str


@dataclass(frozen=True)
class ThemeListMsg:
    """Requests a list of available themes."""


def slugify(text: str) -> str:
    """Make an inbox ID from a display name.

    Spaces become hyphens, characters other than lower-case letters, digits
    and hyphens are dropped, and an empty result becomes ``"inbox"``.
    """
    slug = "".join(
        "-" if ch == " " else ch for ch in text.lower() if ch == " " or ch in _SLUG_CHARS
    )
    return slug or "inbox"


def _account(args: str) -> object:
    parts = args.split()
    if not parts:
        return OpenAccountPickerMsg()
    sub = parts[0].lower()
    match sub:
        case "list":
            return ListAccountsMsg()
        case "switch":
            if len(parts) < 2:
                return CommandErrorMsg("account", "usage: /account switch <id>")
            return SwitchAccountMsg(parts[1])
        case "add":
            return NavigateMsg("setup")
        case _:
            return CommandErrorMsg("account", f"unknown subcommand: {sub}")


def account_command() -> Command:
    """``/account [list|switch <id>|add]``; no argument opens the account picker."""
    return Command("account", "Manage accounts", _account)


def connect_command() -> Command:
    """``/connect`` opens the account setup page."""
    return Command(
        "connect", "Add or reconnect an email account", lambda args: NavigateMsg("setup")
    )


def _daemon(args: str) -> object:
    match args.lower().strip():
        case "start":
            return DaemonStartMsg()
        case "stop":
            return DaemonStopMsg()
        case "" | "status":
            return DaemonStatusMsg()
        case _:
            return CommandErrorMsg("daemon", "usage: /daemon [start|stop|status]")


def daemon_command() -> Command:
    """``/daemon [start|stop|status]``."""
    return Command("daemon", "Control the background sync daemon", _daemon)


def _inbox(args: str) -> object:
    parts = args.split()
    if not parts:
        return CommandErrorMsg("inbox", "usage: /inbox [create|delete|list] <name>")
    sub = parts[0].lower()
    match sub:
        case "create":
            if len(parts) < 2:
                return CommandErrorMsg("inbox", "usage: /inbox create <name>")
            name = " ".join(parts[1:])
            return CreateInboxMsg(id=slugify(name), label=name)
        case "delete":
            if len(parts) < 2:
                return CommandErrorMsg("inbox", "usage: /inbox delete <name>")
            return DeleteInboxMsg(slugify(parts[1]))
        case "list":
            return ListInboxesMsg()
        case _:
            return SwitchInboxMsg(sub)


def inbox_command() -> Command:
    """``/inbox <name>`` switches inbox; ``create``, ``delete`` and ``list`` manage them."""
    return Command("inbox", "Manage split inboxes", _inbox)


def _metrics(args: str) -> object:
    args = args.strip()
    if not args:
        return NavigateMsg("metrics")
    parts = args.split()
    if parts[0] == "export":
        fmt = parts[1].lower() if len(parts) > 1 else "json"
        if fmt not in _EXPORT_FORMATS:
            return CommandErrorMsg(
                "metrics", f"unsupported export format: {fmt} (use json or csv)"
            )
        return MetricsExportMsg(fmt)
    return CommandErrorMsg("metrics", "usage: /metrics [export json|csv]")


def metrics_command() -> Command:
    """``/metrics`` opens the dashboard; ``/metrics export [json|csv]`` exports."""
    return Command("metrics", "View metrics dashboard or export data", _metrics)


def _search(args: str) -> object:
    if args == "":
        return CommandErrorMsg("search", "usage: /search <query>")
    return SearchMsg(args)


def search_command() -> Command:
    """``/search <query>``."""
    return Command("search", "Search messages by keyword (FTS5)", _search)


def shortcuts_command() -> Command:
    """``/shortcuts`` shows the keybinding cheatsheet."""
    return Command("shortcuts", "Show keybinding cheatsheet", lambda args: ShortcutsMsg())


def _theme(args: str) -> object:
    args = args.strip()
    if args in ("", "list"):
        return ThemeListMsg()
    return ThemeChangeMsg(args)


def theme_command() -> Command:
    """``/theme [list]`` lists themes; ``/theme <id>`` applies one."""
    return Command("theme", "Switch theme or list available themes", _theme)


def default_registry() -> Registry:
    """Return a registry holding every built-in command."""
    registry = Registry()
    for factory in (
        connect_command,
        inbox_command,
        search_command,
        theme_command,
        shortcuts_command,
        metrics_command,
        daemon_command,
        account_command,
    ):
        registry.register(factory())
    return registry