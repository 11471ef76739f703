"""
Theme sources - the YAML definitions a generation run reads.

The built-in library ships the Carbon color tokens, the white, g10,
g90 and g100 themes, and their Sassdoc metadata.
"""

from chuk_themes.sources.loader import ThemeLoader

__all__ = ["ThemeLoader"]
