"""
Pydantic models for the theme generator.

This module provides:
- GeneratorConfig: Naming and formatting settings
- Theme: Named token -> color assignment
- ThemeSource: Color token list plus themes, read once per run
- TokenMetadata / TokenMetadataEntry: Role, alias and deprecation notes
"""

from chuk_themes.models.config import GeneratorConfig
from chuk_themes.models.metadata import TokenMetadata, TokenMetadataEntry
from chuk_themes.models.theme import Theme, ThemeSource

__all__ = [
    "GeneratorConfig",
    "Theme",
    "ThemeSource",
    "TokenMetadata",
    "TokenMetadataEntry",
]
