"""Table-of-contents index built from the corpus ``index.md``."""

from __future__ import annotations

import logging
import posixpath
import re
from pathlib import Path, PurePosixPath
from typing import Iterable, List, Tuple

from docref.config import DEFAULT_INDEX_FILE
from docref.errors import BrokenLink
from docref.models import TocEntry
from docref.store import DocumentStore
from docref.utils.text import HEADING_RE, collapse_whitespace, iter_prose_lines, normalize_target

LOGGER = logging.getLogger(__name__)

# Inline links, skipping images. Labels may hold inline code or emphasis.
LINK_RE = re.compile(r"(?<!!)\[([^\]]+)\]\(\s*(<[^>]+>|[^)\s]+)(?:\s+\"[^\"]*\")?\s*\)")
EMPHASIS_RE = re.compile(r"[*_`]+")


def _clean_label(label: str) -> str:
    return collapse_whitespace([EMPHASIS_RE.sub("", label)])


class TocIndex:
    """Ordered (label, path) pairs mirroring the curated index page."""

    def __init__(self, entries: Iterable[TocEntry]) -> None:
        self._entries: Tuple[TocEntry, ...] = tuple(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    @classmethod
    def from_markdown(cls, text: str, base: PurePosixPath | None = None) -> "TocIndex":
        """Parse links from ``text``.

        Relative targets are resolved against ``base``, the directory of the
        index page; targets starting with ``/`` are root-relative.
        """
        entries: List[TocEntry] = []
        seen: set[Path] = set()
        section: str | None = None
        for line in iter_prose_lines(text):
            heading = HEADING_RE.match(line)
            if heading and not LINK_RE.search(line):
                section = _clean_label(heading.group(2))
                continue
            for match in LINK_RE.finditer(line):
                raw = match.group(2).strip("<>")
                target = normalize_target(raw)
                if target is None:
                    continue
                if base is not None and base.parts and not raw.startswith("/"):
                    target = PurePosixPath(posixpath.normpath((base / target).as_posix()))
                path = Path(target)
                if path in seen:
                    LOGGER.debug("Skipping duplicate TOC target %s", target)
                    continue
                seen.add(path)
                entries.append(TocEntry(label=_clean_label(match.group(1)), path=path, section=section))
        return cls(entries)

    @classmethod
    def load(cls, store: DocumentStore, index_file: str = DEFAULT_INDEX_FILE) -> "TocIndex":
        """Parse the index page of ``store``; raises NotFound when it is missing."""
        base = PurePosixPath(Path(index_file).as_posix()).parent
        toc = cls.from_markdown(store.load(index_file).body, base)
        LOGGER.info("Loaded %d TOC entries from %s", len(toc), index_file)
        return toc

    def entries(self) -> Tuple[TocEntry, ...]:
        return self._entries

    def sections(self) -> List[Tuple[str | None, List[TocEntry]]]:
        """Group entries by section, keeping first-seen section order."""
        grouped: dict[str | None, List[TocEntry]] = {}
        for entry in self._entries:
            grouped.setdefault(entry.section, []).append(entry)
        return list(grouped.items())

    def find_broken(self, store: DocumentStore) -> List[TocEntry]:
        return [entry for entry in self._entries if not store.exists(entry.path)]

    def validate(self, store: DocumentStore) -> None:
        """Raise BrokenLink listing every entry that does not resolve."""
        broken = self.find_broken(store)
        if broken:
            for entry in broken:
                LOGGER.error("Broken TOC link: %s -> %s", entry.label, entry.path.as_posix())
            raise BrokenLink(broken)

    def unlisted(self, store: DocumentStore, index_file: str = DEFAULT_INDEX_FILE) -> List[Path]:
        """Markdown files on disk that the index does not mention."""
        listed = {entry.path for entry in self._entries}
        listed.add(Path(index_file))
        return [path for path in store.paths() if path not in listed]
