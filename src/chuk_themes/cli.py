#!/usr/bin/env python3
"""
Entry point for the theme generator.

Reads the token, theme and metadata sources (built-in library, optionally
overridden by a project directory) and writes the generated SCSS files.
"""

import argparse
import logging
import sys
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command line definition."""
    parser = argparse.ArgumentParser(description="Generate SCSS theme files from design tokens")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("scss"),
        help="Directory for the generated files (default: ./scss)",
    )
    parser.add_argument(
        "--project-dir",
        type=Path,
        default=None,
        help="Directory with tokens.yaml / themes.yaml / metadata.yaml overriding the library",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with generator settings",
    )
    parser.add_argument(
        "--default-theme",
        default=None,
        help="Theme backing the default token values",
    )
    parser.add_argument(
        "--formatter",
        choices=["builtin", "prettier"],
        default="builtin",
        help="Output formatter (default: builtin)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when a theme does not define every color token",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Import after argument parsing to keep --help fast
    from chuk_themes.compiler import ThemeEmitter, get_formatter
    from chuk_themes.constants import SuccessMessages
    from chuk_themes.core import validate_themes
    from chuk_themes.models import GeneratorConfig
    from chuk_themes.sources import ThemeLoader

    try:
        config = GeneratorConfig.from_yaml(args.config) if args.config else GeneratorConfig()
        if args.default_theme:
            config = config.model_copy(update={"default_theme": args.default_theme})

        logger.info(SuccessMessages.BUILD_STARTED)

        loader = ThemeLoader(project_path=args.project_dir)
        source = loader.load_source()
        metadata = loader.load_metadata()
        validate_themes(source, config.default_theme, strict=args.strict)

        emitter = ThemeEmitter(config, get_formatter(args.formatter, config))
        result = emitter.build(source, metadata)
        for path in emitter.write(result, args.output_dir):
            logger.info(f"  {path}")
    except Exception:
        logger.exception("Theme generation failed")
        return 1

    logger.info(SuccessMessages.BUILD_DONE)
    return 0


if __name__ == "__main__":
    sys.exit(main())
