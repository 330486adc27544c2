"""Native desktop notifications through the platform's notification tool."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


class NotificationError(Exception):
    """Raised when a notification backend fails."""


def _applescript_string(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


@dataclass
class DesktopNotifier:
    """Sends desktop notifications via osascript on macOS or notify-send elsewhere."""

    platform: str = sys.platform
    runner: Callable[..., Any] = subprocess.run

    def _command(self, title: str, body: str) -> list[str]:
        if self.platform == "darwin":
            script = (
                f"display notification {_applescript_string(body)} "
                f"with title {_applescript_string(title)}"
            )
            return ["osascript", "-e", script]
        if self.platform.startswith(("linux", "freebsd", "openbsd", "netbsd")):
            return ["notify-send", title, body]
        raise NotificationError(f"desktop notify: unsupported platform {self.platform!r}")

    def notify(self, title: str, body: str) -> None:
        """Show a notification with ``title`` and ``body``."""
        command = self._command(title, body)
        try:
            self.runner(command, check=True, capture_output=True)
        except (OSError, subprocess.SubprocessError) as exc:
            raise NotificationError(f"desktop notify: {exc}") from exc