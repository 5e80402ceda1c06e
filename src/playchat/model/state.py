"""
Conversation State
==================
The ordered, append-only list of decoded messages that backs the chat view.

Why is this file needed?
------------------------
1. Hand-off: The background worker posts messages here (via queued Qt
   signals), the view only reads from here and redraws on each signal.
2. Presentation tags: the position of a message decides who "speaks" it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)


class Speaker(Enum):
    """The two parties of the dialogue: (name, side, bubble colour)."""
    ROMEO = ("Romeo", "left", "lightblue")
    JULIET = ("Juliet", "right", "lightgrey")

    def __init__(self, display_name: str, side: str, color: str) -> None:
        self.display_name = display_name
        self.side = side
        self.color = color


def speaker_for(index: int) -> Speaker:
    return Speaker.ROMEO if index % 2 == 0 else Speaker.JULIET


@dataclass(frozen=True)
class ChatEntry:
    index: int
    text: str
    speaker: Speaker


class ConversationStatus(Enum):
    LOADING = "loading"
    FINISHED = "finished"
    FAILED = "failed"


class ConversationStore(QObject):
    """Append-only message list with signals for the view."""
    message_appended = Signal(object)  # ChatEntry
    finished = Signal(int)  # total message count
    failed = Signal(str)

    def __init__(self) -> None:
        super().__init__()
        self._messages: List[ChatEntry] = []
        self.status: ConversationStatus = ConversationStatus.LOADING
        self.failure_reason: Optional[str] = None

    @property
    def messages(self) -> Tuple[ChatEntry, ...]:
        return tuple(self._messages)

    @property
    def count(self) -> int:
        return len(self._messages)

    def append(self, index: int, text: str) -> ChatEntry:
        if self.status is not ConversationStatus.LOADING:
            raise ValueError(f"Conversation is {self.status.value}, cannot append message {index}.")
        if index != len(self._messages):
            raise ValueError(f"Expected message {len(self._messages)}, got {index}.")

        entry = ChatEntry(index=index, text=text, speaker=speaker_for(index))
        self._messages.append(entry)
        self.message_appended.emit(entry)
        return entry

    def mark_finished(self, delivered: Optional[int] = None) -> None:
        if self.status is not ConversationStatus.LOADING:
            return
        if delivered is not None and delivered != self.count:
            logger.warning(f"Worker delivered {delivered} messages but {self.count} were appended.")
        self.status = ConversationStatus.FINISHED
        logger.info(f"Conversation finished after {self.count} messages.")
        self.finished.emit(self.count)

    def mark_failed(self, reason: str) -> None:
        if self.status is not ConversationStatus.LOADING:
            return
        self.status = ConversationStatus.FAILED
        self.failure_reason = reason
        logger.error(f"Conversation stopped: {reason}")
        self.failed.emit(reason)
