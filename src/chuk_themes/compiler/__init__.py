"""
Generation pipeline - turns tokens, themes and metadata into SCSS.

The pipeline:
    ThemeSource + TokenMetadata
    → theme maps / token declarations / theme mixin
    → formatted _theme-maps.scss, _tokens.scss, _mixins.scss
"""

from chuk_themes.compiler.declarations import (
    generate_token_declaration,
    generate_token_declarations,
)
from chuk_themes.compiler.emitter import BuildResult, ThemeEmitter, build_themes
from chuk_themes.compiler.formatting import (
    Formatter,
    FormattingError,
    PrettierFormatter,
    ScssFormatter,
    get_formatter,
)
from chuk_themes.compiler.maps import (
    generate_default_theme_alias,
    generate_theme_map,
    generate_theme_maps,
)
from chuk_themes.compiler.mixins import generate_theme_mixin

__all__ = [
    # Emitter
    "BuildResult",
    "ThemeEmitter",
    "build_themes",
    # Synthesizers
    "generate_default_theme_alias",
    "generate_theme_map",
    "generate_theme_maps",
    "generate_theme_mixin",
    "generate_token_declaration",
    "generate_token_declarations",
    # Formatting
    "Formatter",
    "FormattingError",
    "PrettierFormatter",
    "ScssFormatter",
    "get_formatter",
]
