"""Routing of new-mail notifications to the enabled backends."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from termite.notifications.desktop import DesktopNotifier, NotificationError
from termite.notifications.status import StatusWriter
from termite.notifications.tmux import TmuxNotifier

log = logging.getLogger(__name__)

_SENDER_LIMIT = 3


@dataclass(frozen=True)
class NotificationConfig:
    """Which backends are enabled and which messages trigger them.

    ``notify_on`` is ``"none"``, ``"unread"`` or ``"all"``.
    """

    notify_on: str = "unread"
    desktop: bool = True
    terminal_bell: bool = False
    tmux_title: bool = False
    status_file: bool = False


@dataclass(frozen=True)
class Message:
    """The parts of a message a notification needs."""

    from_addr: str
    subject: str = ""
    is_read: bool = False


def format_notification(messages: Sequence[Message]) -> tuple[str, str]:
    """Build the title and body for a batch of new messages."""
    if len(messages) == 1:
        only = messages[0]
        return f"New email from {only.from_addr}", only.subject

    count = len(messages)
    shown = messages[:_SENDER_LIMIT]
    body = ", ".join(m.from_addr for m in shown)
    if count > len(shown):
        body += f" and {count - len(shown)} more"
    return f"{count} new emails", body


class Manager:
    """Sends notifications through every backend the configuration enables."""

    def __init__(
        self,
        cfg: NotificationConfig,
        desktop: DesktopNotifier | None = None,
        tmux: TmuxNotifier | None = None,
        status: StatusWriter | None = None,
        bell: TextIO | None = None,
    ) -> None:
        self.cfg = cfg
        self.desktop = desktop or DesktopNotifier()
        self.tmux = tmux or TmuxNotifier()
        self.status = status or StatusWriter(Path.home() / ".termite")
        self.bell = bell

    def _relevant(self, messages: Sequence[Message]) -> list[Message]:
        if self.cfg.notify_on == "all":
            return list(messages)
        if self.cfg.notify_on == "unread":
            return [m for m in messages if not m.is_read]
        return []

    def notify(self, messages: Sequence[Message]) -> None:
        """Notify about new messages; raise if any backend failed."""
        if self.cfg.notify_on == "none" or not messages:
            return
        relevant = self._relevant(messages)
        if not relevant:
            return

        title, body = format_notification(relevant)
        errors: list[str] = []

        if self.cfg.desktop:
            try:
                self.desktop.notify(title, body)
            except NotificationError as exc:
                log.warning("desktop notification failed: %s", exc)
                errors.append(f"desktop: {exc}")

        if self.cfg.terminal_bell:
            stream = self.bell or sys.stdout
            stream.write("\a")
            stream.flush()

        if self.cfg.tmux_title:
            self.tmux.set_title(len(relevant))

        if errors:
            raise NotificationError(f"notification errors: [{' '.join(errors)}]")

    def write_status(self, unread_count: int) -> None:
        """Write the status file if it is enabled."""
        if not self.cfg.status_file:
            return
        self.status.write(unread_count)