"""
Theme map synthesis.

Each theme becomes a Sass map from public token name to color:

    /// Carbon's g90 color theme
    /// @type Map
    /// @access public
    /// @group @carbon/themes
    $carbon--theme--g90: (
      interactive-01: #0f62fe,
    ) !default;

followed by one alias binding the default theme map name.
"""

from __future__ import annotations

from collections.abc import Iterable

from chuk_themes.core.naming import format_token_name
from chuk_themes.models.config import GeneratorConfig
from chuk_themes.models.theme import Theme


def generate_theme_map(theme: Theme, config: GeneratorConfig) -> str:
    """
    Generate the map declaration for one theme.

    Entries follow the theme's own key order.
    """
    lines = [
        f"/// {config.brand}'s {theme.name} color theme",
        "/// @type Map",
        "/// @access public",
        f"/// @group {config.package_name}",
        f"{config.theme_map_name(theme.name)}: (",
    ]
    for token, value in theme.tokens.items():
        lines.append(f"  {format_token_name(token)}: {value},")
    lines.append(") !default;")
    return "\n".join(lines) + "\n"


def generate_theme_maps(themes: Iterable[Theme], config: GeneratorConfig) -> str:
    """
    Generate map declarations for all themes, in iteration order.

    Args:
        themes: Themes in source order
        config: Generator configuration

    Returns:
        Map declarations separated by a blank line
    """
    return "\n".join(generate_theme_map(theme, config) for theme in themes)


def generate_default_theme_alias(config: GeneratorConfig) -> str:
    """Generate the declaration aliasing the default theme map."""
    lines = [
        f"/// {config.brand}'s default theme",
        "/// @type Map",
        "/// @access public",
        f"/// @alias {config.theme_map_name(config.default_theme).lstrip('$')}",
        f"/// @group {config.package_name}",
        f"{config.default_theme_map_name}: "
        f"{config.theme_map_name(config.default_theme)} !default;",
    ]
    return "\n".join(lines) + "\n"
