"""Read-only access to the markdown documents of a corpus."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path, PurePath
from typing import List

import frontmatter

from docref.errors import NotFound, UnreadableDocument
from docref.models import Document
from docref.utils.files import MARKDOWN_SUFFIXES, is_within, iter_markdown_paths
from docref.utils.text import extract_title

LOGGER = logging.getLogger(__name__)


def _is_hidden(relative: Path) -> bool:
    # Jekyll-style build and include directories (_site, _includes) and dot dirs.
    return any(part.startswith((".", "_")) for part in relative.parts[:-1])


class DocumentStore:
    """Markdown files on disk, keyed by path relative to ``root``."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)
        if not self.root.is_dir():
            raise NotADirectoryError(f"Corpus root is not a directory: {self.root}")

    def _resolve(self, path: PurePath | str) -> Path:
        relative = Path(path)
        candidate = self.root / relative
        if (
            relative.is_absolute()
            or relative.suffix.lower() not in MARKDOWN_SUFFIXES
            or not is_within(candidate, self.root)
            or not candidate.is_file()
        ):
            raise NotFound(relative)
        return candidate

    def exists(self, path: PurePath | str) -> bool:
        try:
            self._resolve(path)
        except NotFound:
            return False
        return True

    def read_bytes(self, path: PurePath | str) -> bytes:
        return self._resolve(path).read_bytes()

    def _decode(self, path: PurePath | str, raw: bytes) -> str:
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise UnreadableDocument(path, str(exc)) from exc

    def get(self, path: PurePath | str) -> str:
        """Return the raw text of the document at ``path``."""
        text = self._decode(path, self.read_bytes(path))
        LOGGER.debug("Read %s (%d chars)", Path(path).as_posix(), len(text))
        return text

    def load(self, path: PurePath | str) -> Document:
        """Read a document and split off its optional YAML front matter."""
        raw = self.read_bytes(path)
        text = self._decode(path, raw)
        post = frontmatter.loads(text)
        relative = Path(path)
        title = post.metadata.get("title") or extract_title(post.content, relative.stem)
        return Document(
            path=relative,
            title=str(title),
            body=post.content,
            sha256=hashlib.sha256(raw).hexdigest(),
            metadata=dict(post.metadata),
            text=text,
        )

    def paths(self) -> List[Path]:
        """All markdown files under the root, sorted, relative to it."""
        found: List[Path] = []
        for path in iter_markdown_paths([self.root]):
            relative = path.relative_to(self.root)
            if not _is_hidden(relative):
                found.append(relative)
        return sorted(found)
