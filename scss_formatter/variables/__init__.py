"""
SCSS variable handling.
Extracts variable declarations and substitutes hex color literals with them.
"""

from .extraction import VariableExtractor, extract_variables
from .substitution import (
    ColorSubstituter,
    Substitution,
    build_inverse_index,
    normalize_hex,
    substitute_colors,
)

__all__ = [
    'VariableExtractor',
    'extract_variables',
    'ColorSubstituter',
    'Substitution',
    'build_inverse_index',
    'normalize_hex',
    'substitute_colors',
]
