"""
Token naming - internal identifiers to public SCSS names.

Token identifiers are camelCase with an optional trailing scale step
(`interactive01`, `hoverUI`, `uiBackground`). Their public form is
hyphenated lower-case (`interactive-01`, `hover-ui`, `ui-background`).
"""

from __future__ import annotations

import re

# Shape of an internal identifier; anything else passes through
_TOKEN_SHAPE = re.compile(r"[a-z][A-Za-z]*[0-9]*")

# Words of an identifier: acronyms (UI), capitalized/lower words, digit groups
_TOKEN_PARTS = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")


def is_token_identifier(name: str) -> bool:
    """True if `name` has the shape of an internal token identifier."""
    return _TOKEN_SHAPE.fullmatch(name) is not None


def format_token_name(token: str) -> str:
    """
    Format a token identifier as its public declaration name.

    Examples:
        interactive01 -> interactive-01
        hoverUI -> hover-ui
        inverseSupport01 -> inverse-support-01

    Names that are not internal identifiers (including already formatted
    names) are returned unchanged.

    Args:
        token: Internal token identifier

    Returns:
        Public, hyphenated name
    """
    if not is_token_identifier(token):
        return token
    return "-".join(part.lower() for part in _TOKEN_PARTS.findall(token))
