"""
Metadata normalization - rewrites annotations into public names.

Role descriptions reference other tokens by their internal identifier
("Primary button; hover state of interactive01"). Sassdoc readers only
know the public variables, so references become inline code
(`` `$interactive-01` ``) and aliases become public names.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from chuk_themes.core.naming import format_token_name
from chuk_themes.models.metadata import TokenMetadata

logger = logging.getLogger(__name__)


def build_name_map(names: Iterable[str]) -> dict[str, str]:
    """Map raw token identifiers to their public names."""
    return {name: format_token_name(name) for name in names}


def _reference_pattern(names: Iterable[str]) -> re.Pattern[str] | None:
    """
    Regex matching whole-word references to any of `names`.

    Longer identifiers come first so `interactive01` never matches as
    `interactive0`+`1`. A match may not touch word characters, `-`, or a
    preceding `$`, so already rewritten references are left alone.
    """
    ordered = sorted(set(names), key=lambda n: (-len(n), n))
    if not ordered:
        return None
    alternation = "|".join(re.escape(name) for name in ordered)
    return re.compile(rf"(?<![\w$-])(?:{alternation})(?![\w-])")


def _rewrite(
    pattern: re.Pattern[str],
    name_map: dict[str, str],
    text: str,
    skip: str | None = None,
) -> str:
    """Rewrite every reference matched by `pattern`, leaving `skip` as is."""

    def replace(match: re.Match[str]) -> str:
        name = match.group(0)
        if name == skip:
            return name
        return f"`${name_map[name]}`"

    return pattern.sub(replace, text)


def replace_references(text: str, name_map: dict[str, str]) -> str:
    """
    Replace raw token references in `text` with inline code references.

    Args:
        text: Free text, e.g. a role description
        name_map: Raw identifier -> public name

    Returns:
        Text with each reference rewritten as `` `$public-name` ``
    """
    pattern = _reference_pattern(name_map)
    if pattern is None:
        return text
    return _rewrite(pattern, name_map, text)


def transform_metadata(
    metadata: TokenMetadata,
    known_tokens: Iterable[str] | None = None,
) -> TokenMetadata:
    """
    Normalize token metadata in place.

    Known identifiers are the metadata entry names plus `known_tokens`.
    Role strings get their references to other tokens rewritten (an
    entry's mention of itself stays plain text), aliases become public
    names. Running it again on normalized metadata changes nothing.

    Args:
        metadata: Metadata to normalize (mutated)
        known_tokens: Extra identifiers to recognize in role text

    Returns:
        The same metadata object
    """
    names = list(metadata.names())
    if known_tokens is not None:
        names.extend(known_tokens)

    name_map = build_name_map(names)
    pattern = _reference_pattern(name_map)

    for entry in metadata.tokens:
        if entry.role and pattern is not None:
            entry.role = [_rewrite(pattern, name_map, role, skip=entry.name) for role in entry.role]

        if entry.alias:
            entry.alias = format_token_name(entry.alias)

    logger.debug(f"Normalized metadata for {len(metadata.tokens)} tokens")
    return metadata
