"""FastAPI application serving the rendered reference and its TOC."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request

from docref.config import SiteConfig
from docref.errors import NotFound, UnreadableDocument
from docref.web.frontend import open_corpus, router as frontend_router

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="docref", version="0.1.0")
app.state.config = SiteConfig()


@app.get("/api/toc")
async def list_entries(request: Request) -> dict[str, Any]:
    _, toc = open_corpus(request.app.state.config)
    return {"entries": [entry.as_dict() for entry in toc.entries()]}


@app.get("/api/documents/{path:path}")
async def read_document(path: str, request: Request) -> dict[str, Any]:
    store, _ = open_corpus(request.app.state.config)
    try:
        document = store.load(path)
    except NotFound as exc:
        LOGGER.debug("Document request failed: %s", exc)
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except UnreadableDocument as exc:
        LOGGER.warning("%s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return {
        "path": document.path.as_posix(),
        "title": document.title,
        "metadata": document.metadata,
        "sha256": document.sha256,
        "text": document.text,
    }


@app.get("/api/check")
async def check_links(request: Request) -> dict[str, Any]:
    config: SiteConfig = request.app.state.config
    store, toc = open_corpus(config)
    broken = toc.find_broken(store)
    unlisted = toc.unlisted(store, config.index_file)
    return {
        "ok": not broken,
        "broken": [entry.as_dict() for entry in broken],
        "unlisted": [path.as_posix() for path in unlisted],
    }


# Registered last: the page route matches any remaining path.
app.include_router(frontend_router)
