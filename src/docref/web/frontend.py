"""HTML pages for the docref web UI, rendered on request."""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse

from docref.config import SiteConfig
from docref.errors import NotFound, UnreadableDocument
from docref.render import render_document, render_index
from docref.store import DocumentStore
from docref.toc import TocIndex

router = APIRouter()


def open_corpus(config: SiteConfig) -> tuple[DocumentStore, TocIndex]:
    """Open the store and parse its index, mapping failures to HTTP errors."""
    root = config.resolve_root(Path.cwd())
    try:
        store = DocumentStore(root)
    except NotADirectoryError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    try:
        toc = TocIndex.load(store, config.index_file)
    except NotFound as exc:
        raise HTTPException(
            status_code=404, detail=f"Index page {config.index_file} not found under {root}"
        ) from exc
    except UnreadableDocument as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return store, toc


@router.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    config = request.app.state.config
    _, toc = open_corpus(config)
    return HTMLResponse(content=render_index(toc, config))


@router.get("/{page:path}", response_class=HTMLResponse)
async def page(page: str, request: Request) -> HTMLResponse:
    requested = PurePosixPath(page)
    if requested.suffix != ".html":
        raise HTTPException(status_code=404, detail=f"Page not found: {page}")
    config = request.app.state.config
    store, toc = open_corpus(config)
    if requested.as_posix() == "index.html":
        return HTMLResponse(content=render_index(toc, config))
    try:
        document = store.load(requested.with_suffix(".md"))
    except NotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except UnreadableDocument as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return HTMLResponse(content=render_document(document, toc, config))
