"""
Constants and enums for the theme generator.

No magic strings - output file names, Sassdoc annotations and messages
live here so the synthesizers share one vocabulary.
"""

from enum import Enum
from typing import Literal


class OutputFile(str, Enum):
    """
    Generated SCSS artifacts, relative to the output directory.

    Declaration order is the write order.
    """

    TOKENS = "_tokens.scss"
    MIXINS = "_mixins.scss"
    THEME_MAPS = "_theme-maps.scss"


# Artifacts that pull the theme maps in
MAPS_IMPORT = "@import './theme-maps';"

# Source files looked up in the library / project directories
TOKENS_SOURCE = "tokens.yaml"
THEMES_SOURCE = "themes.yaml"
METADATA_SOURCE = "metadata.yaml"

DEFAULT_NAMESPACE = "carbon"
DEFAULT_BRAND = "Carbon"
DEFAULT_PACKAGE_NAME = "@carbon/themes"
DEFAULT_THEME = "white"
DEFAULT_COPYRIGHT = "Copyright IBM Corp. 2018, 2018"
DEFAULT_PRINT_WIDTH = 80

LICENSE_NOTICE = (
    "This source code is licensed under the Apache-2.0 license found in the",
    "LICENSE file in the root directory of this source tree.",
)

# Role strings are joined with this separator in the doc comment
ROLE_SEPARATOR = "; "

FormatterName = Literal["builtin", "prettier"]


class ErrorMessages:
    """Standardized error messages."""

    SOURCE_NOT_FOUND = "Source file '{filename}' not found in project or library."
    INVALID_TOKENS = "Invalid tokens source '{path}': expected a 'colors' list."
    INVALID_THEMES = "Invalid themes source '{path}': expected a 'themes' mapping."
    UNKNOWN_THEME = "Theme '{name}' not found. Available: {available}."
    MISSING_TOKENS = "Theme '{name}' is missing {count} color token(s): {tokens}."
    UNKNOWN_FORMATTER = "Unknown formatter: '{name}'. Expected 'builtin' or 'prettier'."
    FORMAT_FAILED = "Failed to format {artifact}: {reason}"


class SuccessMessages:
    """Standardized success messages."""

    BUILD_STARTED = "Building scss files for themes..."
    FILE_WRITTEN = "Wrote {path}"
    BUILD_DONE = "Done!"
