"""
Theme models - the token list and the themes assigning values to it.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class Theme(BaseModel):
    """
    A named assignment of color values to tokens.

    Key order of `tokens` is preserved and drives the order of the
    generated map. A theme may define fewer tokens than the color list.
    """

    name: str = Field(..., min_length=1, description="Theme name (e.g. 'white', 'g90')")
    tokens: dict[str, str] = Field(
        default_factory=dict,
        description="Token identifier to color literal",
    )

    model_config = {"frozen": True}

    @field_validator("tokens", mode="before")
    @classmethod
    def stringify_values(cls, v: dict) -> dict:
        """
        YAML may hand back numbers for unquoted values like 000.

        A null value is rejected: it usually means an unquoted `#` hex
        color that YAML read as a comment.
        """
        if isinstance(v, dict):
            for key, value in v.items():
                if value is None:
                    raise ValueError(f"Token '{key}' has no value (quote hex colors)")
            return {str(key): str(value) for key, value in v.items()}
        return v


class ThemeSource(BaseModel):
    """
    Immutable snapshot of everything a generation run reads.

    `colors` is the authoritative, ordered list of color tokens; it is
    not derived from the themes.
    """

    colors: list[str] = Field(default_factory=list, description="Ordered color token identifiers")
    themes: list[Theme] = Field(default_factory=list, description="Themes in source order")

    model_config = {"frozen": True}

    @field_validator("themes")
    @classmethod
    def unique_theme_names(cls, v: list[Theme]) -> list[Theme]:
        """Theme names identify maps, so they must be unique."""
        seen: set[str] = set()
        for theme in v:
            if theme.name in seen:
                raise ValueError(f"Duplicate theme name: {theme.name}")
            seen.add(theme.name)
        return v

    def theme_names(self) -> list[str]:
        """Theme names in source order."""
        return [theme.name for theme in self.themes]

    def get_theme(self, name: str) -> Theme | None:
        """Get a theme by name."""
        for theme in self.themes:
            if theme.name == name:
                return theme
        return None
