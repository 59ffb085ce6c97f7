"""Core docref data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict


@dataclass(slots=True)
class Document:
    """A markdown document read from the corpus.

    ``text`` is the full source including front matter; ``body`` is what
    follows the front matter.
    """

    path: Path
    title: str
    body: str
    sha256: str
    metadata: Dict[str, Any] = field(default_factory=dict)
    text: str = ""

    @property
    def layout(self) -> str | None:
        return self.metadata.get("layout")


@dataclass(slots=True, frozen=True)
class TocEntry:
    """Table-of-contents entry: display label paired with a document path."""

    label: str
    path: Path
    section: str | None = None

    def as_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "path": self.path.as_posix(), "section": self.section}
