"""
Token declaration synthesis.

Every color token gets a default declaration backed by the default
theme map, documented with Sassdoc annotations:

    /// Primary interactive color; Primary buttons
    /// @type Color
    /// @access public
    /// @group @carbon/themes
    /// @alias brand-01
    $interactive-01: map-get($carbon--theme, interactive-01) !default;
"""

from __future__ import annotations

from collections.abc import Iterable

from chuk_themes.constants import ROLE_SEPARATOR
from chuk_themes.core.naming import format_token_name
from chuk_themes.models.config import GeneratorConfig
from chuk_themes.models.metadata import TokenMetadata, TokenMetadataEntry


def generate_token_declaration(
    token: str,
    entry: TokenMetadataEntry | None,
    config: GeneratorConfig,
) -> str:
    """
    Generate the documented declaration for a single token.

    Args:
        token: Raw token identifier
        entry: Normalized metadata for the token, if any
        config: Generator configuration

    Returns:
        Doc comment block plus declaration line
    """
    name = format_token_name(token)
    lines: list[str] = []

    if entry and entry.role:
        # Multi-line role text stays inside the doc comment
        role_text = ROLE_SEPARATOR.join(entry.role)
        lines.extend(f"/// {line}".rstrip() for line in role_text.strip().splitlines())

    lines.extend(
        [
            "/// @type Color",
            "/// @access public",
            f"/// @group {config.package_name}",
        ]
    )

    if entry and entry.alias:
        lines.append(f"/// @alias {entry.alias}")
    if entry and entry.deprecated:
        lines.append("/// @deprecated")

    lines.append(f"${name}: map-get({config.default_theme_map_name}, {name}) !default;")
    return "\n".join(lines) + "\n"


def generate_token_declarations(
    colors: Iterable[str],
    metadata: TokenMetadata,
    config: GeneratorConfig,
) -> str:
    """
    Generate declarations for all color tokens, in list order.

    Tokens without metadata still get the fixed annotation block.
    """
    return "\n".join(
        generate_token_declaration(token, metadata.find(token), config) for token in colors
    )
