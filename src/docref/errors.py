"""Errors raised while reading and validating a documentation tree."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from docref.models import TocEntry


class DocrefError(Exception):
    """Base class for docref failures."""


class NotFound(DocrefError):
    """A requested document does not exist under the corpus root."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Document not found: {self.path.as_posix()}")


class BrokenLink(DocrefError):
    """One or more table-of-contents entries point at missing documents."""

    def __init__(self, entries: Sequence["TocEntry"]) -> None:
        self.entries = list(entries)
        listed = ", ".join(entry.path.as_posix() for entry in self.entries)
        super().__init__(f"{len(self.entries)} broken TOC link(s): {listed}")


class UnreadableDocument(DocrefError):
    """A document exists but is not valid UTF-8 text."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read {self.path.as_posix()}: {reason}")
