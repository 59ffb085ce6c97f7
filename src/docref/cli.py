"""Command line interface for docref."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from docref.config import DEFAULT_INDEX_FILE, SiteConfig
from docref.errors import BrokenLink, NotFound, UnreadableDocument
from docref.render import SiteBuilder
from docref.store import DocumentStore
from docref.toc import TocIndex
from docref.web.app import app as web_app


console = Console()
app = typer.Typer(help="docref - static reference builder for markdown interview notes")

ROOT_OPTION = typer.Option(Path("."), "--root", "-r", help="Corpus root directory")
INDEX_OPTION = typer.Option(DEFAULT_INDEX_FILE, "--index", help="Table-of-contents page")
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Verbose logging")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _open(config: SiteConfig) -> tuple[DocumentStore, TocIndex]:
    root = config.resolve_root(Path.cwd())
    if not root.is_dir():
        raise typer.BadParameter(f"Corpus root not found: {root}")
    store = DocumentStore(root)
    try:
        toc = TocIndex.load(store, config.index_file)
    except NotFound:
        console.print(f"[red]Index page {config.index_file} not found under {root}[/red]")
        raise typer.Exit(code=1)
    except UnreadableDocument as error:
        console.print(f"[red]{error}[/red]")
        raise typer.Exit(code=1)
    return store, toc


def _report_broken(error: BrokenLink) -> None:
    console.print(f"[red]{len(error.entries)} broken TOC link(s):[/red]")
    for entry in error.entries:
        console.print(f"  {entry.label} -> {entry.path.as_posix()}")


@app.command()
def toc(
    root: Path = ROOT_OPTION,
    index: str = INDEX_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """List the table-of-contents entries."""
    _setup_logging(verbose)
    _, toc_index = _open(SiteConfig(root=root, index_file=index))

    if not len(toc_index):
        console.print("[yellow]No TOC entries found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#")
    table.add_column("Section")
    table.add_column("Label")
    table.add_column("Path")
    for position, entry in enumerate(toc_index.entries(), start=1):
        table.add_row(str(position), entry.section or "", entry.label, entry.path.as_posix())
    console.print(table)


@app.command()
def check(
    root: Path = ROOT_OPTION,
    index: str = INDEX_OPTION,
    strict: bool = typer.Option(False, "--strict", help="Fail on documents missing from the TOC"),
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Verify that every TOC entry resolves to a document."""
    _setup_logging(verbose)
    config = SiteConfig(root=root, index_file=index)
    store, toc_index = _open(config)

    try:
        toc_index.validate(store)
    except BrokenLink as error:
        _report_broken(error)
        raise typer.Exit(code=1)

    unlisted = toc_index.unlisted(store, config.index_file)
    if unlisted:
        console.print(f"[yellow]{len(unlisted)} document(s) not listed in {config.index_file}:[/yellow]")
        for path in unlisted:
            console.print(f"  {path.as_posix()}")
        if strict:
            raise typer.Exit(code=1)

    console.print(f"[green]OK[/green]: {len(toc_index)} entries resolve.")


@app.command()
def show(
    path: Path = typer.Argument(..., help="Document path relative to the root"),
    root: Path = ROOT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print the raw text of a document."""
    _setup_logging(verbose)
    resolved = SiteConfig(root=root).resolve_root(Path.cwd())
    if not resolved.is_dir():
        raise typer.BadParameter(f"Corpus root not found: {resolved}")

    try:
        text = DocumentStore(resolved).get(path)
    except (NotFound, UnreadableDocument) as error:
        console.print(f"[red]{error}[/red]")
        raise typer.Exit(code=1)
    typer.echo(text, nl=False)


@app.command()
def build(
    root: Path = ROOT_OPTION,
    index: str = INDEX_OPTION,
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Output directory"),
    title: str = typer.Option(SiteConfig().site_title, help="Site title"),
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Render the TOC documents into a static HTML site."""
    _setup_logging(verbose)
    config = SiteConfig(root=root, index_file=index, output_dir=out, site_title=title)
    store, toc_index = _open(config)
    output_dir = config.resolve_output_dir(Path.cwd())

    console.print(f"Building into [bold]{output_dir}[/bold]...")
    try:
        stats = SiteBuilder(store, toc_index, config).build(output_dir)
    except BrokenLink as error:
        _report_broken(error)
        raise typer.Exit(code=1)
    except UnreadableDocument as error:
        console.print(f"[red]{error}[/red]")
        raise typer.Exit(code=1)
    console.print(f"Pages written: {stats.pages}")


@app.command()
def serve(
    root: Path = ROOT_OPTION,
    index: str = INDEX_OPTION,
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Serve the rendered reference over HTTP."""
    _setup_logging(verbose)
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    config = SiteConfig(root=root.resolve(), index_file=index)
    if not (config.root / config.index_file).exists():
        console.print("[yellow]Warning: index page not found, pages will return 404.[/yellow]")

    web_app.state.config = config
    console.print(f"Serving {config.root} on http://{host}:{port}")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
