"""
Theme loader - reads token, theme and metadata definitions.

Sources can come from:
1. Built-in library (shipped with package)
2. Project directory (overrides library files of the same name)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_themes.constants import (
    METADATA_SOURCE,
    THEMES_SOURCE,
    TOKENS_SOURCE,
    ErrorMessages,
)
from chuk_themes.models.metadata import TokenMetadata
from chuk_themes.models.theme import Theme, ThemeSource

logger = logging.getLogger(__name__)


class ThemeLoader:
    """
    Discovers and loads theme definitions.

    Each source file is looked up in the project directory first, then
    in the library. Files are not merged: a project file replaces the
    library file entirely.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the theme loader.

        Args:
            library_path: Path to built-in theme library
            project_path: Path to project source directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path

    def resolve(self, filename: str) -> Path | None:
        """
        Find a source file.

        Args:
            filename: Source file name (e.g. 'themes.yaml')

        Returns:
            Project file if present, else library file, else None
        """
        if self.project_path:
            project_file = self.project_path / filename
            if project_file.exists():
                return project_file

        library_file = self.library_path / filename
        if library_file.exists():
            return library_file

        return None

    def load_source(self) -> ThemeSource:
        """
        Load the color token list and the themes.

        Raises:
            ValueError: A source is missing or malformed
        """
        return ThemeSource(colors=self.load_tokens(), themes=self.load_themes())

    def load_tokens(self) -> list[str]:
        """Load the ordered color token list."""
        path = self._require(TOKENS_SOURCE)
        data = self._read_yaml(path)

        colors = data.get("colors") if isinstance(data, dict) else None
        if not isinstance(colors, list):
            raise ValueError(ErrorMessages.INVALID_TOKENS.format(path=path))

        return [str(token) for token in colors]

    def load_themes(self) -> list[Theme]:
        """Load themes in file order."""
        path = self._require(THEMES_SOURCE)
        data = self._read_yaml(path)

        themes = data.get("themes") if isinstance(data, dict) else None
        if not isinstance(themes, dict):
            raise ValueError(ErrorMessages.INVALID_THEMES.format(path=path))

        try:
            return [Theme(name=str(name), tokens=tokens or {}) for name, tokens in themes.items()]
        except ValidationError as e:
            raise ValueError(f"{ErrorMessages.INVALID_THEMES.format(path=path)} {e}") from e

    def load_metadata(self) -> TokenMetadata:
        """
        Load token metadata.

        Metadata only decorates the output, so any failure is logged and
        an empty metadata set is returned.
        """
        path = self.resolve(METADATA_SOURCE)
        if path is None:
            logger.warning(ErrorMessages.SOURCE_NOT_FOUND.format(filename=METADATA_SOURCE))
            return TokenMetadata()

        try:
            data = self._read_yaml(path)
            return TokenMetadata.model_validate(data or {})
        except (OSError, UnicodeDecodeError, yaml.YAMLError, ValidationError) as e:
            logger.warning(f"Failed to load metadata from {path}: {e}")
            return TokenMetadata()

    def _require(self, filename: str) -> Path:
        """Resolve a source file that must exist."""
        path = self.resolve(filename)
        if path is None:
            raise ValueError(ErrorMessages.SOURCE_NOT_FOUND.format(filename=filename))
        return path

    def _read_yaml(self, path: Path) -> Any:
        """Read a YAML file."""
        logger.debug(f"Reading {path}")
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)
