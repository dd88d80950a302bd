"""
Shared fixtures: fake clipboard and a virtual-time scheduler
"""
import pytest

from pwgen_install.clipboard import Clipboard, ClipboardError
from pwgen_install.scheduler import Scheduler, TimerHandle


class FakeClipboard(Clipboard):
    """Records writes; optionally fails every write"""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.writes = []

    def write_text(self, text: str) -> None:
        if self.fail:
            raise ClipboardError("clipboard access denied")
        self.writes.append(text)


class _VirtualHandle(TimerHandle):

    def __init__(self, due: float, callback):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class VirtualScheduler(Scheduler):
    """Scheduler driven by advance(); callbacks fire when their due time is reached"""

    def __init__(self):
        self.now = 0.0
        self.handles = []

    def call_later(self, delay, callback):
        handle = _VirtualHandle(self.now + delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def pending(self):
        return [h for h in self.handles if not h.cancelled]

    def advance(self, seconds: float):
        target = self.now + seconds
        while True:
            due = sorted((h for h in self.pending if h.due <= target), key=lambda h: h.due)
            if not due:
                break
            handle = due[0]
            self.now = handle.due
            handle.cancelled = True  # fired handles are spent
            handle.callback()
        self.now = target


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def failing_clipboard():
    return FakeClipboard(fail=True)


@pytest.fixture
def scheduler():
    return VirtualScheduler()
