"""
Tests for the core transformations.

Tests cover:
- Token name formatting
- Metadata normalization (references, aliases, idempotence)
- Theme validation
"""

import logging

import pytest

from chuk_themes.core import (
    build_name_map,
    find_missing_tokens,
    format_token_name,
    is_token_identifier,
    replace_references,
    transform_metadata,
    validate_themes,
)
from chuk_themes.models import Theme, ThemeSource, TokenMetadata


class TestFormatTokenName:
    """Tests for format_token_name."""

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("interactive01", "interactive-01"),
            ("ui01", "ui-01"),
            ("uiBackground", "ui-background"),
            ("inverseSupport01", "inverse-support-01"),
            ("hoverUI", "hover-ui"),
            ("inverseHoverUI", "inverse-hover-ui"),
            ("hoverPrimaryText", "hover-primary-text"),
            ("danger", "danger"),
        ],
    )
    def test_formats_identifiers(self, token: str, expected: str):
        """camelCase and digit groups become hyphenated lower-case."""
        assert format_token_name(token) == expected

    def test_deterministic(self):
        """Same input, same output."""
        assert format_token_name("interactive01") == format_token_name("interactive01")

    def test_idempotent(self):
        """Formatting a public name changes nothing."""
        for token in ("interactive01", "hoverUI", "inverseSupport04"):
            once = format_token_name(token)
            assert format_token_name(once) == once

    def test_unexpected_shape_passes_through(self):
        """Names that are not identifiers are returned unchanged."""
        assert format_token_name("Interactive01") == "Interactive01"
        assert format_token_name("brand_01") == "brand_01"
        assert format_token_name("") == ""

    def test_is_token_identifier(self):
        """Recognizes the identifier shape."""
        assert is_token_identifier("interactive01") is True
        assert is_token_identifier("hoverUI") is True
        assert is_token_identifier("interactive-01") is False
        assert is_token_identifier("01interactive") is False


class TestReplaceReferences:
    """Tests for replace_references."""

    def test_replaces_reference(self):
        """A raw identifier becomes an inline variable reference."""
        name_map = build_name_map(["interactive01"])
        assert replace_references("interactive01 hover", name_map) == "`$interactive-01` hover"

    def test_longest_match_first(self):
        """A longer identifier is not split by a shorter one."""
        name_map = build_name_map(["ui01", "hoverUI", "inverseHoverUI"])
        result = replace_references("Hover for inverseHoverUI and hoverUI", name_map)
        assert result == "Hover for `$inverse-hover-ui` and `$hover-ui`"

    def test_word_boundaries(self):
        """Identifiers inside longer words are not replaced."""
        name_map = build_name_map(["text01"])
        assert replace_references("subtext01 and text012", name_map) == "subtext01 and text012"

    def test_no_names(self):
        """Without known names text is unchanged."""
        assert replace_references("interactive01", {}) == "interactive01"


class TestTransformMetadata:
    """Tests for transform_metadata."""

    def _metadata(self) -> TokenMetadata:
        return TokenMetadata.model_validate(
            {
                "tokens": [
                    {"name": "interactive01", "role": ["Primary interactive color"]},
                    {"name": "hoverPrimary", "role": ["interactive01 hover"]},
                    {"name": "brand01", "alias": "interactive01", "deprecated": True},
                ]
            }
        )

    def test_rewrites_roles(self):
        """References to other tokens become inline code."""
        metadata = transform_metadata(self._metadata())
        assert metadata.find("hoverPrimary").role == ["`$interactive-01` hover"]

    def test_rewrites_alias(self):
        """Aliases become public names."""
        metadata = transform_metadata(self._metadata())
        assert metadata.find("brand01").alias == "interactive-01"

    def test_mutates_in_place(self):
        """Returns the same object it was given."""
        metadata = self._metadata()
        assert transform_metadata(metadata) is metadata

    def test_self_reference_untouched(self):
        """An entry mentioning its own token keeps the text as is."""
        metadata = TokenMetadata.model_validate(
            {"tokens": [{"name": "interactive01", "role": ["supports interactive01 state"]}]}
        )
        transform_metadata(metadata)
        assert metadata.find("interactive01").role == ["supports interactive01 state"]

    def test_known_tokens(self):
        """Tokens without metadata entries are still recognized."""
        metadata = TokenMetadata.model_validate(
            {"tokens": [{"name": "hoverUI", "role": ["ui01 hover"]}]}
        )
        transform_metadata(metadata, known_tokens=["ui01"])
        assert metadata.find("hoverUI").role == ["`$ui-01` hover"]

    def test_idempotent(self):
        """A second pass over normalized metadata changes nothing."""
        metadata = transform_metadata(self._metadata())
        snapshot = metadata.model_dump()
        transform_metadata(metadata)
        assert metadata.model_dump() == snapshot

    def test_empty_metadata(self):
        """Empty metadata is fine."""
        metadata = transform_metadata(TokenMetadata())
        assert metadata.tokens == []

    def test_role_string_coerced(self):
        """A bare role string is treated as a one-element list."""
        metadata = TokenMetadata.model_validate({"tokens": [{"name": "focus", "role": "Focus"}]})
        assert metadata.find("focus").role == ["Focus"]


class TestValidation:
    """Tests for theme validation."""

    def _source(self) -> ThemeSource:
        return ThemeSource(
            colors=["interactive01", "ui01"],
            themes=[
                Theme(name="white", tokens={"interactive01": "#0f62fe", "ui01": "#f4f4f4"}),
                Theme(name="g90", tokens={"interactive01": "#0f62fe"}),
            ],
        )

    def test_find_missing_tokens(self):
        """Only incomplete themes are reported."""
        assert find_missing_tokens(self._source()) == {"g90": ["ui01"]}

    def test_missing_tokens_warn(self, caplog):
        """Incomplete themes are logged by default."""
        with caplog.at_level(logging.WARNING):
            validate_themes(self._source(), "white")
        assert "g90" in caplog.text
        assert "ui01" in caplog.text

    def test_missing_tokens_strict(self):
        """Strict mode rejects incomplete themes."""
        with pytest.raises(ValueError, match="g90"):
            validate_themes(self._source(), "white", strict=True)

    def test_unknown_default_theme(self):
        """The default theme must exist."""
        with pytest.raises(ValueError, match="g100"):
            validate_themes(self._source(), "g100")

    def test_duplicate_theme_names(self):
        """Theme names must be unique."""
        with pytest.raises(ValueError):
            ThemeSource(themes=[Theme(name="white"), Theme(name="white")])
