#!/usr/bin/env python3
"""
PwGen Install Helper Clipboard Access
Clipboard capability used by the install widget
"""

from abc import ABC, abstractmethod

import pyperclip


class ClipboardError(RuntimeError):
    """Raised when text could not be written to the clipboard"""


class Clipboard(ABC):
    """
    Abstract clipboard capability
    """

    @abstractmethod
    def write_text(self, text: str) -> None:
        """
        Write text to the clipboard

        Args:
            text: Text to copy

        Raises:
            ClipboardError: if the write failed (no backend, permission denied)
        """
        pass


class PyperclipClipboard(Clipboard):
    """System clipboard via pyperclip"""

    def write_text(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(str(e) or "No clipboard backend available") from e
