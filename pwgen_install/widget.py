#!/usr/bin/env python3
"""
PwGen Install Helper Install Widget
Platform-aware quick install state: current platform plus a transient
"copied" flag that resets itself after a fixed delay.

The widget never reads global environment state. The host hands it an
identifier string, a clipboard capability and a scheduler; tests swap the
last two for fakes and drive time by hand.
"""

import threading
from typing import Mapping, Optional, Union
from dataclasses import dataclass

from pwgen_install.clipboard import Clipboard, ClipboardError, PyperclipClipboard
from pwgen_install.platform.catalog import INSTALL_CATALOG, InstallInfo, lookup
from pwgen_install.platform.detector import DEFAULT_PLATFORM, Platform, detect_platform
from pwgen_install.scheduler import Scheduler, ThreadingScheduler, TimerHandle

COPIED_RESET_DELAY = 2.0  # seconds

COPY_BUTTON_TEXT = "📋 Copy"
COPIED_BUTTON_TEXT = "✅ Copied!"


@dataclass(frozen=True)
class WidgetView:
    """Everything a renderer needs for one frame"""
    platform: Platform
    label: str
    command: str
    note: str
    copied: bool

    @property
    def title(self) -> str:
        return f"Install via {self.label}"

    @property
    def button_text(self) -> str:
        return COPIED_BUTTON_TEXT if self.copied else COPY_BUTTON_TEXT


class InstallWidget:
    """
    Quick install widget state machine

    States are Idle (copied False) and Copied (copied True), both with a
    platform selected at all times. copy_command() enters Copied and
    (re)starts the reset timer; the timer returns the widget to Idle.
    """

    def __init__(self,
                 identifier: Optional[str],
                 clipboard: Optional[Clipboard] = None,
                 scheduler: Optional[Scheduler] = None,
                 catalog: Mapping[Platform, InstallInfo] = INSTALL_CATALOG,
                 reset_delay: float = COPIED_RESET_DELAY,
                 confirm_write: bool = False):
        """
        Args:
            identifier: Environment identifier (browser user-agent or host_identifier())
            clipboard: Clipboard capability (default: system clipboard)
            scheduler: Timer source (default: threading timers)
            catalog: Install instructions per platform
            reset_delay: Seconds the copied flag stays set after a copy
            confirm_write: Leave copied unset when the clipboard write fails
        """
        if reset_delay <= 0:
            raise ValueError(f"reset_delay must be positive, got {reset_delay}")

        self._identifier = identifier
        self._clipboard = clipboard if clipboard is not None else PyperclipClipboard()
        self._scheduler = scheduler if scheduler is not None else ThreadingScheduler()
        self._catalog = catalog
        self.reset_delay = reset_delay
        self.confirm_write = confirm_write

        self.platform: Platform = DEFAULT_PLATFORM
        self.copied = False
        self.initialized = False
        self.last_copy_failed = False
        self.last_copy_error: Optional[ClipboardError] = None

        self._pending: Optional[TimerHandle] = None
        self._generation = 0
        # Reset callbacks may run on a timer thread
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, identifier: Optional[str], config, **kwargs) -> 'InstallWidget':
        """Build a widget using settings from a WidgetConfig"""
        kwargs.setdefault('reset_delay', config.copied_reset_delay)
        kwargs.setdefault('confirm_write', config.confirm_clipboard_write)
        return cls(identifier, **kwargs)

    def initialize(self) -> Platform:
        """
        Detect the default platform; runs detection once per widget

        Returns:
            The selected platform
        """
        if not self.initialized:
            self.platform = detect_platform(self._identifier)
            self.copied = False
            self.initialized = True
        return self.platform

    def select_platform(self, p: Union[Platform, str]) -> None:
        """Switch platform; copied flag and pending timer are left alone"""
        if not isinstance(p, Platform):
            p = Platform.from_value(p)
        self.platform = p

    @property
    def info(self) -> InstallInfo:
        return lookup(self.platform, self._catalog)

    @property
    def has_pending_reset(self) -> bool:
        return self._pending is not None

    def copy_command(self) -> bool:
        """
        Copy the current command to the clipboard and show the acknowledgment

        Clipboard failures never propagate; they are recorded in
        last_copy_failed / last_copy_error.

        Returns:
            True if the clipboard write succeeded
        """
        command = self.info.command
        try:
            self._clipboard.write_text(command)
        except ClipboardError as e:
            self.last_copy_failed = True
            self.last_copy_error = e
        else:
            self.last_copy_failed = False
            self.last_copy_error = None

        if self.last_copy_failed and self.confirm_write:
            return False

        with self._lock:
            self.copied = True
            self._restart_reset_timer()
        return not self.last_copy_failed

    def _restart_reset_timer(self):
        self._cancel_pending()
        self._generation += 1
        generation = self._generation
        self._pending = self._scheduler.call_later(
            self.reset_delay, lambda: self._reset_copied(generation)
        )

    def _reset_copied(self, generation: int):
        # A replaced timer may still fire (threading.Timer cancel race)
        with self._lock:
            if generation != self._generation:
                return
            self.copied = False
            self._pending = None

    def _cancel_pending(self):
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def close(self) -> None:
        """Drop the pending reset; call when the widget leaves the display"""
        with self._lock:
            self._cancel_pending()
            self._generation += 1
            self.copied = False

    def render(self) -> WidgetView:
        """Snapshot of the current state for renderers"""
        with self._lock:
            copied = self.copied
        info = self.info
        return WidgetView(
            platform=self.platform,
            label=info.label,
            command=info.command,
            note=info.note,
            copied=copied,
        )
