"""Exceptions raised by the message store and loader."""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class ChatError(Exception):
    """Base class for all application errors."""


class MessageWriteError(ChatError):
    """Materialising the encoded message files failed. Fatal at startup."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class MessageReadError(ChatError):
    """A message file exists but could not be read or decoded."""

    def __init__(self, message: str, index: int, path: Path) -> None:
        super().__init__(message)
        self.index = index
        self.path = path
