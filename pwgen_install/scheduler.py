#!/usr/bin/env python3
"""
PwGen Install Helper Scheduler
Cancellable delayed callbacks for widget timers
"""

import threading
from abc import ABC, abstractmethod
from typing import Callable


class TimerHandle(ABC):
    """A pending delayed callback"""

    @abstractmethod
    def cancel(self) -> None:
        """Cancel the callback. Safe to call after it already ran."""
        pass


class Scheduler(ABC):
    """
    Abstract scheduler: run a callback once after a delay
    """

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """
        Schedule a callback

        Args:
            delay: Seconds to wait
            callback: Called with no arguments once the delay elapses

        Returns:
            Handle that cancels the callback
        """
        pass


class _ThreadTimerHandle(TimerHandle):

    def __init__(self, timer: threading.Timer):
        self._timer = timer

    def cancel(self) -> None:
        self._timer.cancel()


class ThreadingScheduler(Scheduler):
    """Scheduler backed by daemon threading.Timer threads"""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return _ThreadTimerHandle(timer)
