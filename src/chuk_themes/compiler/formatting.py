"""
Output formatting - the last normalization pass before writing.

Two formatters share one interface (`format(text) -> str`):
- ScssFormatter: built-in, deterministic, no external tools
- PrettierFormatter: pipes text through the prettier CLI
"""

from __future__ import annotations

import logging
import re
import subprocess
from collections.abc import Sequence
from typing import Protocol

from chuk_themes.constants import DEFAULT_PRINT_WIDTH, ErrorMessages, FormatterName
from chuk_themes.models.config import GeneratorConfig

logger = logging.getLogger(__name__)

INDENT = "  "

_OPENERS = "{("
_CLOSERS = "})"

_DOUBLE_QUOTED = re.compile(r'"([^"\'\\\n]*)"')
_SINGLE_QUOTED = re.compile(r"'([^\"'\\\n]*)'")


class FormattingError(RuntimeError):
    """Raised when an artifact cannot be formatted."""


class Formatter(Protocol):
    """Anything that turns generated text into its final form."""

    def format(self, text: str) -> str: ...


def _split_comment(line: str) -> tuple[str, str]:
    """Split a line into code and trailing `//` comment, respecting quotes."""
    quote: str | None = None
    for i, char in enumerate(line):
        if quote:
            if char == quote:
                quote = None
        elif char in "'\"":
            quote = char
        elif line.startswith("//", i):
            return line[:i], line[i:]
    return line, ""


def _strip_strings(code: str) -> str:
    """Drop quoted string contents so brackets inside strings are not counted."""
    return _SINGLE_QUOTED.sub("''", _DOUBLE_QUOTED.sub('""', code))


class ScssFormatter:
    """
    Built-in SCSS normalizer.

    Not a full pretty-printer: it fixes what the synthesizers can vary
    (indentation, blank lines, quote style, trailing whitespace) and
    leaves everything else alone, so output is stable across runs.

    Lines are never wrapped: `print_width` only flags over-long lines in
    the debug log. Use PrettierFormatter to enforce the width.
    """

    def __init__(self, print_width: int = DEFAULT_PRINT_WIDTH, single_quote: bool = True):
        self.print_width = print_width
        self.single_quote = single_quote

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> ScssFormatter:
        return cls(print_width=config.print_width, single_quote=config.single_quote)

    def format(self, text: str) -> str:
        """
        Format SCSS text.

        Raises:
            FormattingError: Brackets are unbalanced
        """
        lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        output: list[str] = []
        depth = 0

        for lineno, raw in enumerate(lines, start=1):
            stripped = raw.strip()
            if not stripped:
                # Collapse runs of blank lines, drop leading ones
                if output and output[-1] != "":
                    output.append("")
                continue

            code, comment = _split_comment(stripped)
            code = self._convert_quotes(code)
            bare = _strip_strings(code)

            level = depth
            if bare.startswith(tuple(_CLOSERS)):
                level -= 1

            depth += sum(bare.count(c) for c in _OPENERS) - sum(bare.count(c) for c in _CLOSERS)
            if level < 0 or depth < 0:
                raise FormattingError(f"Unbalanced closing bracket on line {lineno}: {stripped}")

            line = f"{INDENT * level}{code}{comment}".rstrip()
            if len(line) > self.print_width:
                logger.debug(f"Line {lineno} exceeds {self.print_width} columns: {line}")
            output.append(line)

        if depth != 0:
            raise FormattingError(f"Unbalanced brackets: {depth} block(s) left open")

        while output and output[-1] == "":
            output.pop()
        return "\n".join(output) + "\n"

    def _convert_quotes(self, code: str) -> str:
        """Apply the configured quote style to simple string literals."""
        if self.single_quote:
            return _DOUBLE_QUOTED.sub(r"'\1'", code)
        return _SINGLE_QUOTED.sub(r'"\1"', code)


class PrettierFormatter:
    """
    Formats through the prettier CLI.

    Requires prettier to be resolvable by `command` (npx by default).
    """

    def __init__(
        self,
        command: Sequence[str] = ("npx", "prettier"),
        print_width: int = DEFAULT_PRINT_WIDTH,
        single_quote: bool = True,
    ):
        self.command = tuple(command)
        self.print_width = print_width
        self.single_quote = single_quote

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> PrettierFormatter:
        return cls(print_width=config.print_width, single_quote=config.single_quote)

    def arguments(self) -> list[str]:
        """Full command line passed to the subprocess."""
        args = [
            *self.command,
            "--parser",
            "scss",
            "--print-width",
            str(self.print_width),
            "--trailing-comma",
            "es5",
        ]
        if self.single_quote:
            args.append("--single-quote")
        return args

    def format(self, text: str) -> str:
        """
        Format SCSS text with prettier.

        Raises:
            FormattingError: prettier is missing or exits with an error
        """
        try:
            result = subprocess.run(
                self.arguments(),
                input=text,
                check=True,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            raise FormattingError(f"Formatter not found: {self.command[0]}") from e
        except subprocess.CalledProcessError as e:
            raise FormattingError(e.stderr.strip() or str(e)) from e
        return result.stdout


def get_formatter(name: FormatterName | str, config: GeneratorConfig) -> Formatter:
    """
    Create a formatter by name.

    Args:
        name: 'builtin' or 'prettier'
        config: Supplies print width and quote style

    Raises:
        ValueError: Unknown formatter name
    """
    if name == "builtin":
        return ScssFormatter.from_config(config)
    if name == "prettier":
        return PrettierFormatter.from_config(config)
    raise ValueError(ErrorMessages.UNKNOWN_FORMATTER.format(name=name))
