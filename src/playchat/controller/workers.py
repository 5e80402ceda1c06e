"""
Background Workers (Threading)
==============================
This module contains the QThread that owns the message files.

Why is this file needed?
------------------------
1. Responsiveness: All file I/O (writing the encoded cache, reading it back)
   happens off the GUI thread, so the chat keeps redrawing smoothly.
2. Signals: Decoded messages reach the GUI through Qt Signals, which Qt
   delivers as queued calls into the GUI thread.

Classes:
    ConversationWorker: Writes the message cache, then streams it back.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from PySide6.QtCore import QThread, Signal

from playchat.config import DEFAULT_INTERVAL_MS
from playchat.model.errors import MessageReadError, MessageWriteError
from playchat.model.loader import MessageLoader
from playchat.model.store import MessageStore, load_source_text

logger = logging.getLogger(__name__)

# Longest uninterrupted sleep, so stop() is noticed quickly.
_PAUSE_SLICE_MS = 50


class ConversationWorker(QThread):
    message_loaded = Signal(int, str)  # (index, decoded text)
    exhausted = Signal(int)  # number of messages delivered
    read_failed = Signal(str)
    write_failed = Signal(str)
    error_occurred = Signal(str)  # anything unexpected

    def __init__(
        self,
        source_path: Union[str, Path],
        messages_dir: Union[str, Path],
        interval_ms: int = DEFAULT_INTERVAL_MS,
    ) -> None:
        super().__init__()
        self.source_path = Path(source_path)
        self.store = MessageStore(messages_dir)
        self.loader = MessageLoader(messages_dir)
        self.interval_ms = interval_ms
        self.is_running = True

    def run(self) -> None:
        try:
            logger.info("Starting conversation worker in background thread...")
            self._run_conversation()
        except Exception as e:
            logger.error(f"Error in ConversationWorker: {e}")
            self.error_occurred.emit(str(e))

    def _run_conversation(self) -> None:
        # 1. Materialise the encoded cache
        try:
            text = load_source_text(self.source_path)
            self.store.write_all(text)
        except (OSError, UnicodeDecodeError, MessageWriteError) as e:
            logger.error(f"Error preparing messages: {e}")
            self.write_failed.emit(str(e))
            return

        # 2. Stream it back, one message per interval
        delivered = 0
        try:
            for message in self.loader:
                if not self.is_running:
                    break
                self.message_loaded.emit(message.index, message.text)
                delivered += 1
                self._pause()
                if not self.is_running:
                    break
        except MessageReadError as e:
            self.read_failed.emit(str(e))
            return

        if self.is_running:
            self.exhausted.emit(delivered)
        else:
            logger.info(f"Conversation worker stopped after {delivered} messages.")

    def _pause(self) -> None:
        remaining = self.interval_ms
        while remaining > 0 and self.is_running:
            step = min(remaining, _PAUSE_SLICE_MS)
            self.msleep(step)
            remaining -= step

    def stop(self) -> None:
        self.is_running = False
