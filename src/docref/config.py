"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_INDEX_FILE = "index.md"
DEFAULT_OUTPUT_DIR = Path("_site")
DEFAULT_SITE_TITLE = "JavaScript & React Interview Notes"


@dataclass(slots=True)
class SiteConfig:
    root: Path = Path(".")
    index_file: str = DEFAULT_INDEX_FILE
    output_dir: Path | None = None
    site_title: str = DEFAULT_SITE_TITLE

    def __post_init__(self) -> None:
        self.root = Path(self.root)
        if self.output_dir is None:
            self.output_dir = DEFAULT_OUTPUT_DIR

    def resolve_root(self, base_dir: Path | None = None) -> Path:
        if self.root.is_absolute() or base_dir is None:
            return self.root
        return base_dir / self.root

    def resolve_output_dir(self, base_dir: Path | None = None) -> Path:
        """Resolve the output directory; relative paths live under the root."""
        output_dir = Path(self.output_dir)
        if output_dir.is_absolute():
            return output_dir
        return self.resolve_root(base_dir) / output_dir
