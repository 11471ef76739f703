"""
Theme-switch mixin synthesis.

The mixin assigns every token variable with `!global`, runs the
caller's content, then re-includes itself without arguments when a
non-default theme was applied. State lives in global variables, so a
nested include resets the outer theme as soon as the inner one ends.
"""

from __future__ import annotations

from collections.abc import Iterable

from chuk_themes.core.naming import format_token_name
from chuk_themes.models.config import GeneratorConfig


def _mixin_doc(config: GeneratorConfig) -> list[str]:
    """Sassdoc block for the mixin."""
    mixin = config.mixin_name
    example_map = config.theme_map_name("g90")
    return [
        "/// Define theme variables from a map of tokens",
        "/// @access public",
        f"/// @param {{Map}} $theme [{config.default_theme_map_name}] - Map of theme tokens",
        "/// @content Pass in your custom declaration blocks to be used after the "
        "token maps set theming variables.",
        "///",
        "/// @example scss",
        "///   // Default usage",
        f"///   @include {mixin}();",
        "///",
        f"///   // Alternate styling (not {config.default_theme} theme)",
        f"///   @include {mixin}({example_map}) {{",
        "///     // declarations...",
        "///   }",
        "///",
        "///   // Inline styling",
        f"///   @include {mixin}({example_map}) {{",
        "///     .my-dark-theme {",
        "///       // declarations...",
        "///     }",
        "///   }",
        "///",
        f"/// @group {config.package_name}",
    ]


def generate_theme_mixin(colors: Iterable[str], config: GeneratorConfig) -> str:
    """
    Generate the theme-switch mixin.

    Args:
        colors: Color token identifiers, in declaration order
        config: Generator configuration

    Returns:
        Mixin source
    """
    default_map = config.default_theme_map_name
    lines = _mixin_doc(config)
    lines.append(f"@mixin {config.mixin_name}($theme: {default_map}) {{")

    for token in colors:
        name = format_token_name(token)
        lines.append(f"  ${name}: map-get($theme, {name}) !global;")

    lines.extend(
        [
            "",
            "  @content;",
            "",
            "  // Reset to default theme after apply in content",
            f"  @if $theme != {default_map} {{",
            f"    @include {config.mixin_name};",
            "  }",
            "}",
        ]
    )
    return "\n".join(lines) + "\n"
