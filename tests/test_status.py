import json
from datetime import datetime

import pytest

from termite.notifications.desktop import NotificationError
from termite.notifications.status import StatusWriter


def test_write_records_count(tmp_path):
    writer = StatusWriter(tmp_path)
    writer.write(4)
    data = json.loads((tmp_path / "status.json").read_text(encoding="utf-8"))
    assert data["unread_count"] == 4
    assert data["running"] is True
    assert datetime.fromisoformat(data["updated_at"]).tzinfo is not None
    assert not (tmp_path / "status.json.tmp").exists()


def test_write_overwrites(tmp_path):
    writer = StatusWriter(tmp_path)
    writer.write(9)
    writer.write(1)
    data = json.loads(writer.path.read_text(encoding="utf-8"))
    assert data["unread_count"] == 1


def test_clear_marks_not_running(tmp_path):
    writer = StatusWriter(tmp_path)
    writer.write(7)
    writer.clear()
    data = json.loads(writer.path.read_text(encoding="utf-8"))
    assert data["running"] is False
    assert data["unread_count"] == 0
    assert set(data) == {"unread_count", "updated_at", "running"}


def test_creates_missing_directory(tmp_path):
    writer = StatusWriter(tmp_path / "nested" / "dir")
    writer.write(2)
    assert writer.path == tmp_path / "nested" / "dir" / "status.json"
    assert writer.path.is_file()


def test_unusable_directory_raises(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    writer = StatusWriter(blocker)
    with pytest.raises(NotificationError, match="status write"):
        writer.write(1)
    with pytest.raises(NotificationError, match="status clear"):
        writer.clear()