"""Tests for site configuration."""

from __future__ import annotations

from pathlib import Path

from docref.config import SiteConfig


class TestSiteConfig:
    """Test SiteConfig dataclass."""

    def test_default_config(self) -> None:
        """Should create config with default values."""
        config = SiteConfig()

        assert config.root == Path(".")
        assert config.index_file == "index.md"
        assert config.output_dir == Path("_site")
        assert config.site_title == "JavaScript & React Interview Notes"

    def test_custom_config(self) -> None:
        """Should accept custom values and coerce root to Path."""
        config = SiteConfig(root="/notes", index_file="README.md", output_dir=Path("/out"), site_title="Notes")

        assert config.root == Path("/notes")
        assert config.index_file == "README.md"
        assert config.output_dir == Path("/out")
        assert config.site_title == "Notes"

    def test_resolve_root_relative_with_base(self) -> None:
        """Should resolve a relative root against base_dir."""
        config = SiteConfig(root=Path("notes"))

        assert config.resolve_root(Path("/base")) == Path("/base/notes")

    def test_resolve_root_absolute(self) -> None:
        """Should return an absolute root as-is."""
        config = SiteConfig(root=Path("/abs/notes"))

        assert config.resolve_root(Path("/base")) == Path("/abs/notes")

    def test_resolve_output_dir_default(self) -> None:
        """Default output dir lives under the root."""
        config = SiteConfig(root=Path("/notes"))

        assert config.resolve_output_dir() == Path("/notes/_site")

    def test_resolve_output_dir_absolute(self) -> None:
        """An absolute output dir is kept."""
        config = SiteConfig(root=Path("/notes"), output_dir=Path("/tmp/site"))

        assert config.resolve_output_dir(Path("/base")) == Path("/tmp/site")

    def test_resolve_output_dir_relative_root(self) -> None:
        """Relative root and output dir both resolve against base_dir."""
        config = SiteConfig(root=Path("notes"), output_dir=Path("public"))

        assert config.resolve_output_dir(Path("/base")) == Path("/base/notes/public")

    def test_explicit_none_output_dir(self) -> None:
        """Passing output_dir=None falls back to _site at construction."""
        config = SiteConfig(root=Path("/notes"), output_dir=None)

        assert config.output_dir == Path("_site")
        assert config.resolve_output_dir() == Path("/notes/_site")
