"""
Theme validation - checks the generator can rely on before emitting.

Themes are not required to define every color token. A missing token
just produces a shorter map (and a null `map-get` at consumption time),
so by default it is reported, not rejected. Strict mode rejects it.
"""

from __future__ import annotations

import logging

from chuk_themes.constants import ErrorMessages
from chuk_themes.models.theme import ThemeSource

logger = logging.getLogger(__name__)


def find_missing_tokens(source: ThemeSource) -> dict[str, list[str]]:
    """
    List, per theme, the color tokens the theme does not define.

    Only incomplete themes appear in the result; token order follows
    the color list.
    """
    missing: dict[str, list[str]] = {}
    for theme in source.themes:
        absent = [token for token in source.colors if token not in theme.tokens]
        if absent:
            missing[theme.name] = absent
    return missing


def validate_themes(source: ThemeSource, default_theme: str, strict: bool = False) -> None:
    """
    Validate a theme source before generation.

    Args:
        source: Tokens and themes to check
        default_theme: Theme the default alias points at
        strict: Raise on themes missing color tokens instead of warning

    Raises:
        ValueError: Default theme unknown, or strict and a theme is incomplete
    """
    if source.get_theme(default_theme) is None:
        raise ValueError(
            ErrorMessages.UNKNOWN_THEME.format(
                name=default_theme,
                available=", ".join(source.theme_names()) or "none",
            )
        )

    for name, absent in find_missing_tokens(source).items():
        message = ErrorMessages.MISSING_TOKENS.format(
            name=name,
            count=len(absent),
            tokens=", ".join(absent),
        )
        if strict:
            raise ValueError(message)
        logger.warning(message)
