#!/usr/bin/env python3
"""
Example: Build SCSS theme files programmatically.

Loads the built-in library, adds a custom theme on top of it, and
writes the generated files to ./output/scss.
"""

from pathlib import Path

from chuk_themes.compiler import ThemeEmitter
from chuk_themes.core import find_missing_tokens, validate_themes
from chuk_themes.models import GeneratorConfig, Theme, ThemeSource
from chuk_themes.sources import ThemeLoader


def main():
    loader = ThemeLoader()
    library = loader.load_source()
    metadata = loader.load_metadata()

    print(f"Library: {len(library.colors)} color tokens")
    print(f"Themes: {', '.join(library.theme_names())}")

    # Derive a high-contrast theme from white
    white = library.get_theme("white")
    contrast = Theme(
        name="contrast",
        tokens={**white.tokens, "focus": "#000000", "ui04": "#161616"},
    )
    source = ThemeSource(colors=library.colors, themes=[*library.themes, contrast])

    config = GeneratorConfig()
    validate_themes(source, config.default_theme)
    print(f"Incomplete themes: {find_missing_tokens(source) or 'none'}")

    emitter = ThemeEmitter(config)
    result = emitter.build(source, metadata)

    output_dir = Path("output") / "scss"
    for path in emitter.write(result, output_dir):
        print(f"  Wrote {path} ({path.stat().st_size} bytes)")


if __name__ == "__main__":
    main()
