"""Text helpers for markdown sources."""

from __future__ import annotations

import re
from pathlib import PurePosixPath
from typing import Iterable, Iterator
from urllib.parse import unquote, urlsplit

HEADING_RE = re.compile(r"^(#{1,6})\s+(.+?)\s*#*\s*$")
FENCE_RE = re.compile(r"^\s*(```|~~~)")


def extract_title(text: str, fallback: str) -> str:
    """Return the first level-one heading, or ``fallback``."""
    for line in iter_prose_lines(text):
        match = HEADING_RE.match(line)
        if match and len(match.group(1)) == 1:
            return match.group(2).strip()
    return fallback


def iter_prose_lines(text: str) -> Iterator[str]:
    """Yield lines that are not inside fenced code blocks."""
    fence: str | None = None
    for line in text.splitlines():
        match = FENCE_RE.match(line)
        if match:
            if fence is None:
                fence = match.group(1)
            elif fence == match.group(1):
                fence = None
            continue
        if fence is None:
            yield line


def is_external(target: str) -> bool:
    parts = urlsplit(target)
    return bool(parts.scheme) or target.startswith("//")


def normalize_target(target: str) -> PurePosixPath | None:
    """Turn a link target from ``index.md`` into a corpus-relative markdown path.

    Returns ``None`` for external links and pure anchors.
    """
    target = target.strip().strip("<>")
    if not target or target.startswith("#") or is_external(target):
        return None
    path = unquote(urlsplit(target).path)
    while path.startswith("./"):
        path = path[2:]
    path = path.lstrip("/")
    if not path:
        return None
    posix = PurePosixPath(path)
    if posix.suffix.lower() == ".html":
        posix = posix.with_suffix(".md")
    elif not posix.suffix:
        posix = posix.with_name(posix.name + ".md")
    return posix


def collapse_whitespace(parts: Iterable[str]) -> str:
    """Collapse runs of whitespace in each part and join with single spaces."""
    return " ".join(" ".join(part.split()) for part in parts if part.strip())
