"""
Core transformations shared by every synthesizer:
- format_token_name: Internal identifier -> public SCSS name
- transform_metadata: Rewrite role/alias annotations into public names
- validate_themes: Default theme and token coverage checks
"""

from chuk_themes.core.metadata import build_name_map, replace_references, transform_metadata
from chuk_themes.core.naming import format_token_name, is_token_identifier
from chuk_themes.core.validation import find_missing_tokens, validate_themes

__all__ = [
    # Naming
    "format_token_name",
    "is_token_identifier",
    # Metadata
    "build_name_map",
    "replace_references",
    "transform_metadata",
    # Validation
    "find_missing_tokens",
    "validate_themes",
]
