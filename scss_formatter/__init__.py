"""Replace hex color literals in SCSS files with matching SCSS variables."""

from .variables import extract_variables, normalize_hex, substitute_colors

__version__ = "0.1.0"

__all__ = ['extract_variables', 'normalize_hex', 'substitute_colors']
