"""
Generator configuration.

Everything that names things in the generated SCSS (namespace, Sassdoc
group, banner) is configuration, so the same pipeline can emit themes for
any design system.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from chuk_themes.constants import (
    DEFAULT_BRAND,
    DEFAULT_COPYRIGHT,
    DEFAULT_NAMESPACE,
    DEFAULT_PACKAGE_NAME,
    DEFAULT_PRINT_WIDTH,
    DEFAULT_THEME,
    LICENSE_NOTICE,
)


class GeneratorConfig(BaseModel):
    """Naming and formatting settings for a generation run."""

    namespace: str = Field(
        default=DEFAULT_NAMESPACE,
        min_length=1,
        description="Prefix for theme maps and the theme mixin (e.g. 'carbon')",
    )
    brand: str = Field(
        default=DEFAULT_BRAND,
        description="Display name used in map doc comments",
    )
    package_name: str = Field(
        default=DEFAULT_PACKAGE_NAME,
        description="Sassdoc group and generator name in the banner",
    )
    default_theme: str = Field(
        default=DEFAULT_THEME,
        min_length=1,
        description="Theme backing the default declarations and mixin argument",
    )
    copyright_notice: str = Field(
        default=DEFAULT_COPYRIGHT,
        description="Copyright line of the file banner",
    )
    print_width: int = Field(
        default=DEFAULT_PRINT_WIDTH,
        gt=0,
        description="Target line width for the formatter",
    )
    single_quote: bool = Field(
        default=True,
        description="Prefer single quoted strings",
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @classmethod
    def from_yaml(cls, path: Path | str) -> GeneratorConfig:
        """
        Load a configuration from a YAML file.

        An empty file yields the defaults.

        Args:
            path: YAML file with GeneratorConfig fields

        Returns:
            GeneratorConfig
        """
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls.model_validate(data)

    def theme_map_name(self, theme: str) -> str:
        """SCSS variable holding the map for a theme."""
        return f"${self.namespace}--theme--{theme}"

    @property
    def default_theme_map_name(self) -> str:
        """SCSS variable aliasing the default theme map."""
        return f"${self.namespace}--theme"

    @property
    def mixin_name(self) -> str:
        """Name of the theme-switch mixin."""
        return f"{self.namespace}--theme"

    @property
    def file_banner(self) -> str:
        """License / generated-file notice at the top of every artifact."""
        lines = [
            f"// Code generated by {self.package_name}. DO NOT EDIT.",
            "//",
            f"// {self.copyright_notice}",
            "//",
            *(f"// {line}" for line in LICENSE_NOTICE),
            "//",
        ]
        return "\n".join(lines) + "\n"
