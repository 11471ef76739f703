"""
Tests for ThemeLoader.

Tests cover:
- Built-in library contents
- Project overrides
- Degraded metadata loading
- Malformed sources
"""

import logging
from pathlib import Path

import pytest

from chuk_themes.core import find_missing_tokens
from chuk_themes.sources import ThemeLoader


class TestLibrary:
    """Tests against the shipped library."""

    def test_load_source(self):
        """The library provides tokens and four themes."""
        source = ThemeLoader().load_source()
        assert source.colors[0] == "interactive01"
        assert len(source.colors) == 61
        assert source.theme_names() == ["white", "g10", "g90", "g100"]

    def test_themes_complete(self):
        """Every library theme defines every color token."""
        assert find_missing_tokens(ThemeLoader().load_source()) == {}

    def test_theme_values(self):
        """Values come through as strings."""
        white = ThemeLoader().load_source().get_theme("white")
        assert white.tokens["interactive01"] == "#0f62fe"
        assert white.tokens["overlay01"] == "rgba(22, 22, 22, 0.5)"

    def test_load_metadata(self):
        """Library metadata covers aliases and deprecations."""
        metadata = ThemeLoader().load_metadata()
        brand = metadata.find("brand01")
        assert brand.alias == "interactive01"
        assert brand.deprecated is True
        assert metadata.find("interactive01").role == ["Primary interactive color", "Primary buttons"]


class TestProjectOverrides:
    """Tests for project source directories."""

    def test_project_file_wins(self, temp_dir: Path):
        """A project themes file replaces the library one."""
        (temp_dir / "themes.yaml").write_text(
            "themes:\n  dark:\n    interactive01: '#000000'\n  light:\n    interactive01: '#ffffff'\n"
        )
        loader = ThemeLoader(project_path=temp_dir)
        source = loader.load_source()
        assert source.theme_names() == ["dark", "light"]
        # Tokens still come from the library
        assert len(source.colors) == 61

    def test_resolve(self, temp_dir: Path):
        """Resolution prefers the project, then the library."""
        (temp_dir / "tokens.yaml").write_text("colors:\n  - ui01\n")
        loader = ThemeLoader(project_path=temp_dir)
        assert loader.resolve("tokens.yaml") == temp_dir / "tokens.yaml"
        assert loader.resolve("themes.yaml") == loader.library_path / "themes.yaml"
        assert loader.resolve("missing.yaml") is None


class TestFailures:
    """Tests for missing and malformed sources."""

    def test_missing_tokens_file(self, temp_dir: Path):
        """A missing tokens file is an error."""
        loader = ThemeLoader(library_path=temp_dir)
        with pytest.raises(ValueError, match="tokens.yaml"):
            loader.load_tokens()

    def test_invalid_tokens(self, temp_dir: Path):
        """Tokens must be a list under 'colors'."""
        (temp_dir / "tokens.yaml").write_text("colors: interactive01\n")
        with pytest.raises(ValueError, match="colors"):
            ThemeLoader(library_path=temp_dir).load_tokens()

    def test_unquoted_hex_value(self, temp_dir: Path):
        """An unquoted hex color reads as null and is rejected."""
        (temp_dir / "themes.yaml").write_text("themes:\n  white:\n    interactive01: #0f62fe\n")
        with pytest.raises(ValueError, match="interactive01"):
            ThemeLoader(library_path=temp_dir).load_themes()

    def test_invalid_themes(self, temp_dir: Path):
        """Themes must be a mapping under 'themes'."""
        (temp_dir / "themes.yaml").write_text("themes:\n  - white\n")
        with pytest.raises(ValueError, match="themes"):
            ThemeLoader(library_path=temp_dir).load_themes()

    def test_malformed_metadata(self, temp_dir: Path, caplog):
        """Unparseable metadata degrades to an empty set with a warning."""
        (temp_dir / "metadata.yaml").write_text("tokens: [unclosed\n")
        with caplog.at_level(logging.WARNING):
            metadata = ThemeLoader(project_path=temp_dir).load_metadata()
        assert metadata.tokens == []
        assert "metadata" in caplog.text

    def test_invalid_metadata_shape(self, temp_dir: Path):
        """Metadata with the wrong shape degrades to an empty set."""
        (temp_dir / "metadata.yaml").write_text("tokens:\n  - role: [no name]\n")
        assert ThemeLoader(project_path=temp_dir).load_metadata().tokens == []

    def test_missing_metadata(self, temp_dir: Path):
        """No metadata file at all also yields an empty set."""
        assert ThemeLoader(library_path=temp_dir).load_metadata().tokens == []

    def test_undecodable_metadata(self, temp_dir: Path, caplog):
        """Metadata that is not valid UTF-8 degrades to an empty set."""
        (temp_dir / "metadata.yaml").write_bytes(b"tokens:\n  - name: ui01\n    role: [\xff\xfe bad]\n")
        with caplog.at_level(logging.WARNING):
            metadata = ThemeLoader(project_path=temp_dir).load_metadata()
        assert metadata.tokens == []
        assert "metadata" in caplog.text
