"""
Token metadata - free-text annotations rendered as Sassdoc comments.

Entries are mutable: the normalizer rewrites role text and aliases from
internal token identifiers to public names once per run.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class TokenMetadataEntry(BaseModel):
    """Annotations for a single token."""

    name: str = Field(..., description="Raw token identifier (e.g. 'interactive01')")
    role: list[str] = Field(default_factory=list, description="Role descriptions")
    alias: str | None = Field(None, description="Token this one aliases")
    deprecated: bool = Field(False, description="Token is deprecated")

    @field_validator("role", mode="before")
    @classmethod
    def coerce_role(cls, v: object) -> object:
        """Accept a single role string or null."""
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v


class TokenMetadata(BaseModel):
    """All token annotations of a run."""

    tokens: list[TokenMetadataEntry] = Field(default_factory=list)

    def names(self) -> list[str]:
        """Raw identifiers of all entries, in document order."""
        return [entry.name for entry in self.tokens]

    def find(self, name: str) -> TokenMetadataEntry | None:
        """First entry for a raw token identifier, or None."""
        for entry in self.tokens:
            if entry.name == name:
                return entry
        return None
