"""
Message Store (Writer)
======================
Materialises the source dialogue as one encoded file per paragraph.

Layout on disk::

    <directory>/0.rot
    <directory>/1.rot
    ...

The files are numbered from 0 with no gaps. The first missing index marks the
end of the conversation, see :mod:`playchat.model.loader`.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from playchat.model import cipher
from playchat.model.errors import MessageWriteError

logger = logging.getLogger(__name__)

MESSAGE_SUFFIX: str = ".rot"
PARAGRAPH_SEPARATOR: str = "\n\n"

_INDEX_FILE_RE = re.compile(r"^(\d+)" + re.escape(MESSAGE_SUFFIX) + r"$")


@dataclass(frozen=True)
class Paragraph:
    """One unit of dialogue and its encoded form."""
    index: int
    text: str
    encoded: str


def split_paragraphs(text: str) -> List[str]:
    """
    Split on blank lines and strip each paragraph.

    Paragraphs that are empty after stripping (e.g. from three or more
    consecutive newlines) are skipped.
    """
    normalized = text.replace("\r\n", "\n")
    paragraphs = [part.strip() for part in normalized.split(PARAGRAPH_SEPARATOR)]
    return [p for p in paragraphs if p]


def message_path(directory: Path, index: int) -> Path:
    return directory / f"{index}{MESSAGE_SUFFIX}"


def load_source_text(path: Union[str, Path]) -> str:
    """Read the bundled dialogue text."""
    logger.info(f"Reading source text from: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


class MessageStore:
    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = Path(directory)

    def path_for(self, index: int) -> Path:
        return message_path(self.directory, index)

    def write_all(self, text: str) -> List[Paragraph]:
        """
        Encode every paragraph of `text` and write it to its index file.

        Existing files are overwritten, so running twice on the same text gives
        identical files. Index files beyond the new paragraph count are removed.
        Any OS error aborts the whole operation with MessageWriteError.
        """
        paragraphs = [
            Paragraph(index=i, text=p, encoded=cipher.encode(p))
            for i, p in enumerate(split_paragraphs(text))
        ]

        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise MessageWriteError(f"Cannot create message directory '{self.directory}': {e}", self.directory) from e

        for paragraph in paragraphs:
            path = self.path_for(paragraph.index)
            try:
                with open(path, "w", encoding="utf-8", newline="") as f:
                    f.write(paragraph.encoded)
            except OSError as e:
                raise MessageWriteError(f"Cannot write message file '{path}': {e}", path) from e
            logger.debug(f"Wrote message {paragraph.index} to {path}")

        self._remove_stale(len(paragraphs))
        logger.info(f"Stored {len(paragraphs)} messages in {self.directory}")
        return paragraphs

    def _remove_stale(self, count: int) -> None:
        """Delete index files >= count left over from a longer source text."""
        try:
            existing = list(self.directory.iterdir())
        except OSError as e:
            raise MessageWriteError(f"Cannot list message directory '{self.directory}': {e}", self.directory) from e

        for path in existing:
            match = _INDEX_FILE_RE.match(path.name)
            if match is None or int(match.group(1)) < count:
                continue
            try:
                path.unlink()
            except OSError as e:
                raise MessageWriteError(f"Cannot remove stale message file '{path}': {e}", path) from e
            logger.debug(f"Removed stale message file {path}")
