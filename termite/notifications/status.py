"""A JSON status file that external tools such as status bars can read."""

from __future__ import annotations

import json
import os
from datetime import datetime
from pathlib import Path

from termite.notifications.desktop import NotificationError

STATUS_FILENAME = "status.json"


def _timestamp() -> str:
    text = datetime.now().astimezone().isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        return text.removesuffix("+00:00") + "Z"
    return text


def _render(unread_count: int, running: bool) -> str:
    return json.dumps(
        {"unread_count": unread_count, "updated_at": _timestamp(), "running": running},
        indent=2,
    )


class StatusWriter:
    """Writes ``status.json`` in the data directory."""

    def __init__(self, data_dir: str | os.PathLike[str]) -> None:
        self.data_dir = Path(data_dir)

    @property
    def path(self) -> Path:
        """Location of the status file."""
        return self.data_dir / STATUS_FILENAME

    def write(self, unread_count: int) -> None:
        """Atomically record the unread count with the running flag set."""
        target = self.path
        temp = target.with_name(target.name + ".tmp")
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            temp.write_text(_render(unread_count, True), encoding="utf-8")
            os.replace(temp, target)
        except OSError as exc:
            raise NotificationError(f"status write: {exc}") from exc

    def clear(self) -> None:
        """Record that the application is no longer running."""
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            self.path.write_text(_render(0, False), encoding="utf-8")
        except OSError as exc:
            raise NotificationError(f"status clear: {exc}") from exc