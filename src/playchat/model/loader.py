"""
Message Loader (Reader)
=======================
Reads the encoded message files back in index order and decodes them.

The loader is a small state machine over `next_index`:

    LOADING --(file missing)--> EXHAUSTED
    LOADING --(unreadable)----> FAILED

A present file is decoded, `next_index` advances and the loader stays in
LOADING. EXHAUSTED and FAILED are terminal: no further reads happen.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional, Union

from playchat.model import cipher
from playchat.model.errors import MessageReadError
from playchat.model.store import message_path

logger = logging.getLogger(__name__)


class LoaderState(Enum):
    LOADING = "loading"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


@dataclass(frozen=True)
class DecodedMessage:
    index: int
    text: str


class MessageLoader:
    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = Path(directory)
        self.next_index: int = 0
        self.state: LoaderState = LoaderState.LOADING

    @property
    def is_finished(self) -> bool:
        return self.state is not LoaderState.LOADING

    def load_next(self) -> Optional[DecodedMessage]:
        """
        Read and decode the file at `next_index`.

        Returns None once the stream has ended. Raises MessageReadError (and
        moves to FAILED) if the file exists but cannot be read.
        """
        if self.is_finished:
            return None

        index = self.next_index
        path = message_path(self.directory, index)
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                encoded = f.read()
        except FileNotFoundError:
            self.state = LoaderState.EXHAUSTED
            logger.info(f"No message file at index {index}, conversation exhausted.")
            return None
        except (OSError, UnicodeDecodeError) as e:
            self.state = LoaderState.FAILED
            logger.error(f"Cannot read message file '{path}': {e}")
            raise MessageReadError(f"Cannot read message {index} from '{path}': {e}", index, path) from e

        self.next_index += 1
        logger.debug(f"Loaded message {index}")
        return DecodedMessage(index=index, text=cipher.decode(encoded))

    def __iter__(self) -> Iterator[DecodedMessage]:
        while True:
            message = self.load_next()
            if message is None:
                return
            yield message
