"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_themes.models import GeneratorConfig, Theme, ThemeSource, TokenMetadata


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config() -> GeneratorConfig:
    """Default generator configuration."""
    return GeneratorConfig()


@pytest.fixture
def scenario_source() -> ThemeSource:
    """One token, a light and a dark theme."""
    return ThemeSource(
        colors=["interactive01"],
        themes=[
            Theme(name="white", tokens={"interactive01": "#ff0000"}),
            Theme(name="g90", tokens={"interactive01": "#0000ff"}),
        ],
    )


@pytest.fixture
def scenario_metadata() -> TokenMetadata:
    """Metadata whose role text mentions only its own token."""
    return TokenMetadata.model_validate(
        {"tokens": [{"name": "interactive01", "role": ["supports interactive01 state"]}]}
    )
