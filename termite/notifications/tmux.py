"""tmux window-title updates that show the unread count."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass
class TmuxNotifier:
    """Renames the current tmux window; does nothing outside tmux."""

    environ: Mapping[str, str] = field(default_factory=lambda: os.environ)
    runner: Callable[..., Any] = subprocess.run

    def in_tmux(self) -> bool:
        """Report whether the process runs inside a tmux session."""
        return bool(self.environ.get("TMUX", ""))

    def _run(self, *args: str) -> Any:
        return self.runner(["tmux", *args], check=True, capture_output=True, text=True)

    def set_title(self, unread_count: int) -> None:
        """Set the window title to ``termite`` plus the unread count, if any."""
        if not self.in_tmux():
            return
        title = f"termite ({unread_count})" if unread_count > 0 else "termite"
        try:
            self._run("rename-window", title)
        except (OSError, subprocess.SubprocessError):
            pass  # best effort

    def reset_title(self) -> None:
        """Give the window back to tmux's automatic naming."""
        if not self.in_tmux():
            return
        try:
            self._run("set-window-option", "automatic-rename", "on")
        except (OSError, subprocess.SubprocessError):
            pass  # best effort

    def current_pane(self) -> str:
        """Return the current pane ID, or an empty string."""
        if not self.in_tmux():
            return ""
        try:
            result = self._run("display-message", "-p", "#{pane_id}")
        except (OSError, subprocess.SubprocessError):
            return ""
        return (result.stdout or "").strip()