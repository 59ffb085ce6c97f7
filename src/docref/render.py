"""Render the corpus into a static HTML reference.

Markdown conversion is delegated to the ``markdown`` package; this module
only wires documents, the table of contents and the page template together.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from importlib.resources import files
from pathlib import Path, PurePath
from string import Template
from typing import List, Sequence
from urllib.parse import quote, urlsplit, urlunsplit

import markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from docref.config import SiteConfig
from docref.models import Document, TocEntry
from docref.store import DocumentStore
from docref.toc import TocIndex

LOGGER = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "toc"]


def local_page_href(href: str) -> str:
    """Point a relative ``.md`` href at its rendered ``.html`` page."""
    parts = urlsplit(href)
    if parts.scheme or parts.netloc or not parts.path.lower().endswith(".md"):
        return href
    return urlunsplit(parts._replace(path=parts.path[: -len(".md")] + ".html"))


class LocalLinkTreeprocessor(Treeprocessor):
    def run(self, root):
        for anchor in root.iter("a"):
            href = anchor.get("href")
            if href:
                anchor.set("href", local_page_href(href))


class LocalLinkExtension(Extension):
    """Rewrite links between corpus documents to their rendered pages."""

    def extendMarkdown(self, md):
        # After inline parsing (priority 20) so link elements exist.
        md.treeprocessors.register(LocalLinkTreeprocessor(md), "docref_local_links", 5)


@lru_cache(maxsize=1)
def load_template() -> Template:
    source = files("docref").joinpath("templates").joinpath("page.html")
    return Template(source.read_text(encoding="utf-8"))


def render_markdown(text: str) -> str:
    return markdown.markdown(text, extensions=[*MARKDOWN_EXTENSIONS, LocalLinkExtension()])


def page_path(path: PurePath) -> PurePath:
    """Output location of the page rendered from ``path``."""
    return path.with_suffix(".html")


def page_href(path: PurePath) -> str:
    return quote(page_path(path).as_posix())


def root_prefix(path: PurePath) -> str:
    """Relative prefix leading from ``path`` back to the site root."""
    return "../" * (len(path.parts) - 1)


def _link(prefix: str, entry: TocEntry, rel: str | None = None) -> str:
    rel_attr = f' rel="{rel}"' if rel else ""
    return f'<a href="{prefix}{page_href(entry.path)}"{rel_attr}>{html.escape(entry.label)}</a>'


def _pager(entries: Sequence[TocEntry], path: PurePath, prefix: str) -> str:
    positions = [i for i, entry in enumerate(entries) if entry.path == path]
    if not positions:
        return ""
    position = positions[0]
    parts = ["<span></span>", "<span></span>"]
    if position > 0:
        parts[0] = "&larr; " + _link(prefix, entries[position - 1], rel="prev")
    if position + 1 < len(entries):
        parts[1] = _link(prefix, entries[position + 1], rel="next") + " &rarr;"
    return "".join(parts)


def render_document(document: Document, toc: TocIndex, config: SiteConfig) -> str:
    prefix = root_prefix(document.path)
    return load_template().substitute(
        title=html.escape(document.title),
        site_title=html.escape(config.site_title),
        root=prefix,
        content=render_markdown(document.body),
        pager=_pager(toc.entries(), document.path, prefix),
    )


def render_index(toc: TocIndex, config: SiteConfig) -> str:
    lines: List[str] = [f"<h1>{html.escape(config.site_title)}</h1>"]
    for section, entries in toc.sections():
        if section:
            lines.append(f"<h2>{html.escape(section)}</h2>")
        lines.append("<ol>")
        lines.extend(f"  <li>{_link('', entry)}</li>" for entry in entries)
        lines.append("</ol>")
    return load_template().substitute(
        title="Contents",
        site_title=html.escape(config.site_title),
        root="",
        content="\n".join(lines),
        pager="",
    )


@dataclass(slots=True)
class BuildStats:
    output_dir: Path
    written: List[Path] = field(default_factory=list)

    @property
    def pages(self) -> int:
        return len(self.written)


class SiteBuilder:
    """Writes one page per TOC entry plus an index page."""

    def __init__(self, store: DocumentStore, toc: TocIndex, config: SiteConfig) -> None:
        self.store = store
        self.toc = toc
        self.config = config

    def build(self, output_dir: Path | None = None) -> BuildStats:
        """Validate the TOC, then render every listed document.

        Raises BrokenLink before anything is written when an entry does not
        resolve.
        """
        self.toc.validate(self.store)
        target = Path(output_dir) if output_dir is not None else self.config.resolve_output_dir()
        target.mkdir(parents=True, exist_ok=True)
        stats = BuildStats(output_dir=target)

        index_path = Path(self.config.index_file)
        for entry in self.toc.entries():
            if entry.path == index_path:
                LOGGER.warning("Index page links to itself, skipping %s", entry.path.as_posix())
                continue
            document = self.store.load(entry.path)
            stats.written.append(
                self._write(target, page_path(entry.path), render_document(document, self.toc, self.config))
            )

        stats.written.append(self._write(target, Path("index.html"), render_index(self.toc, self.config)))
        LOGGER.info("Wrote %d pages to %s", stats.pages, target)
        return stats

    def _write(self, target: Path, relative: PurePath, content: str) -> Path:
        destination = target / relative
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(content, encoding="utf-8")
        LOGGER.debug("Wrote %s", destination)
        return destination
