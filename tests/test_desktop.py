import subprocess

import pytest

from termite.notifications.desktop import DesktopNotifier, NotificationError


def _recorder(calls, error=None):
    def run(cmd, **kwargs):
        calls.append(cmd)
        if error is not None:
            raise error
        return subprocess.CompletedProcess(cmd, 0)

    return run


def test_linux_uses_notify_send():
    calls = []
    DesktopNotifier(platform="linux", runner=_recorder(calls)).notify("Title", "Body")
    assert calls == [["notify-send", "Title", "Body"]]


def test_macos_uses_osascript_with_escaping():
    calls = []
    notifier = DesktopNotifier(platform="darwin", runner=_recorder(calls))
    notifier.notify('Say "hi"', "line")
    assert len(calls) == 1
    cmd = calls[0]
    assert cmd[:2] == ["osascript", "-e"]
    assert '\\"hi\\"' in cmd[2]
    assert '"line"' in cmd[2]


def test_missing_tool_raises():
    calls = []
    notifier = DesktopNotifier(
        platform="linux", runner=_recorder(calls, FileNotFoundError("notify-send"))
    )
    with pytest.raises(NotificationError, match="desktop notify"):
        notifier.notify("a", "b")


def test_failed_tool_raises():
    calls = []
    error = subprocess.CalledProcessError(1, ["notify-send"])
    notifier = DesktopNotifier(platform="linux", runner=_recorder(calls, error))
    with pytest.raises(NotificationError):
        notifier.notify("a", "b")
    assert len(calls) == 1


def test_unsupported_platform_raises():
    calls = []
    notifier = DesktopNotifier(platform="plan9", runner=_recorder(calls))
    with pytest.raises(NotificationError, match="unsupported"):
        notifier.notify("a", "b")
    assert calls == []