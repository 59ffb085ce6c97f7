"""Utility helpers for working with files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

MARKDOWN_SUFFIXES = (".md", ".markdown")


def iter_markdown_paths(inputs: Iterable[Path]) -> Iterator[Path]:
    """Yield markdown paths from input paths, descending into directories."""
    for item in inputs:
        if item.is_dir():
            children = sorted(
                child for child in item.rglob("*") if child.suffix.lower() in MARKDOWN_SUFFIXES
            )
            yield from iter_markdown_paths(children)
        elif item.is_file() and item.suffix.lower() in MARKDOWN_SUFFIXES:
            yield item


def is_within(path: Path, root: Path) -> bool:
    """Return True when ``path`` resolves inside ``root``."""
    try:
        path.resolve().relative_to(root.resolve())
    except ValueError:
        return False
    return True
