"""
Theme Emitter - assembles and writes the generated SCSS files.

The pipeline:
    metadata.yaml → TokenMetadata → transform_metadata (once)
    tokens.yaml + themes.yaml → ThemeSource
    → theme maps, token declarations, theme mixin (independent bodies)
    → banner + import + body per artifact
    → formatter → _tokens.scss, _mixins.scss, _theme-maps.scss

Files are formatted and written one at a time. A failure stops the run
without touching files written before it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from chuk_themes.compiler.declarations import generate_token_declarations
from chuk_themes.compiler.formatting import Formatter, FormattingError, ScssFormatter
from chuk_themes.compiler.maps import generate_default_theme_alias, generate_theme_maps
from chuk_themes.compiler.mixins import generate_theme_mixin
from chuk_themes.constants import MAPS_IMPORT, ErrorMessages, OutputFile, SuccessMessages
from chuk_themes.core.metadata import transform_metadata
from chuk_themes.models.config import GeneratorConfig
from chuk_themes.models.metadata import TokenMetadata
from chuk_themes.models.theme import ThemeSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildResult:
    """Unformatted text of the three generated artifacts."""

    tokens: str
    mixins: str
    theme_maps: str

    def files(self) -> list[tuple[OutputFile, str]]:
        """Artifacts paired with their file names, in write order."""
        return [
            (OutputFile.TOKENS, self.tokens),
            (OutputFile.MIXINS, self.mixins),
            (OutputFile.THEME_MAPS, self.theme_maps),
        ]


class ThemeEmitter:
    """
    Builds the theme artifacts and writes them to disk.

    The emitter holds configuration and a formatter only; every build
    is a pure function of its inputs.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        formatter: Formatter | None = None,
    ):
        """
        Initialize the emitter.

        Args:
            config: Naming and formatting settings
            formatter: Final formatting pass (built-in formatter by default)
        """
        self.config = config or GeneratorConfig()
        self.formatter = formatter or ScssFormatter.from_config(self.config)

    def build(self, source: ThemeSource, metadata: TokenMetadata) -> BuildResult:
        """
        Build the raw artifacts.

        Normalizes `metadata` in place before the declarations read it.

        Args:
            source: Color token list and themes
            metadata: Raw token metadata

        Returns:
            BuildResult with unformatted artifact text
        """
        transform_metadata(metadata, known_tokens=source.colors)

        banner = self.config.file_banner
        header = f"{banner}\n{MAPS_IMPORT}\n\n"

        declarations = generate_token_declarations(source.colors, metadata, self.config)
        mixin = generate_theme_mixin(source.colors, self.config)
        maps = generate_theme_maps(source.themes, self.config)
        default_alias = generate_default_theme_alias(self.config)

        return BuildResult(
            tokens=header + declarations,
            mixins=header + mixin,
            theme_maps=f"{banner}\n{maps}\n{default_alias}",
        )

    def render(self, result: BuildResult) -> dict[OutputFile, str]:
        """Format every artifact without writing anything."""
        return {output: self._format(output, text) for output, text in result.files()}

    def write(self, result: BuildResult, output_dir: Path | str) -> list[Path]:
        """
        Format and write the artifacts.

        Args:
            result: Built artifacts
            output_dir: Directory to write into (created if missing)

        Returns:
            Paths written, in write order

        Raises:
            FormattingError: An artifact could not be formatted
            OSError: A file could not be written
        """
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        written: list[Path] = []
        for output, text in result.files():
            formatted = self._format(output, text)
            path = output_dir / output.value
            with open(path, "w", encoding="utf-8", newline="\n") as f:
                f.write(formatted)
            logger.debug(SuccessMessages.FILE_WRITTEN.format(path=path))
            written.append(path)

        return written

    def _format(self, output: OutputFile, text: str) -> str:
        """Run the formatter, naming the artifact on failure."""
        try:
            return self.formatter.format(text)
        except FormattingError as e:
            raise FormattingError(
                ErrorMessages.FORMAT_FAILED.format(artifact=output.value, reason=e)
            ) from e


def build_themes(
    source: ThemeSource,
    metadata: TokenMetadata | None = None,
    output_dir: Path | str | None = None,
    config: GeneratorConfig | None = None,
    formatter: Formatter | None = None,
) -> BuildResult:
    """
    Convenience function to build (and optionally write) the artifacts.

    Args:
        source: Color token list and themes
        metadata: Token metadata (empty if omitted)
        output_dir: Optional directory to write the SCSS files to
        config: Generator configuration
        formatter: Formatter for written files

    Returns:
        BuildResult with unformatted artifact text
    """
    emitter = ThemeEmitter(config, formatter)
    result = emitter.build(source, metadata or TokenMetadata())

    if output_dir:
        emitter.write(result, output_dir)

    return result
