"""
Hex color substitution.
Replaces hex color literals with references to SCSS variables holding the
same value.
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping


HEX_COLOR_PATTERN = re.compile(r'#[0-9a-f]{3,6}', re.IGNORECASE)


@dataclass
class Substitution:
    """A single literal replaced by a variable reference."""
    start: int
    end: int
    original: str
    replacement: str


def normalize_hex(hex_value: str) -> str:
    """
    Expand a short hex color ('#abc' -> '#aabbcc').

    Only the 3-digit form is expanded. Every other length, including the
    4-digit alpha form '#abcd', is returned unchanged. Case is preserved.
    """
    if len(hex_value) == 4:
        return f"#{hex_value[1] * 2}{hex_value[2] * 2}{hex_value[3] * 2}"
    return hex_value


def build_inverse_index(variables: Mapping[str, str]) -> Dict[str, str]:
    """
    Build a normalized value -> '$name' lookup from a variable table.

    Only values that are a whole hex literal are expanded; anything else
    ('1000', 'bold', '1px solid #000') is indexed lowercased as written.
    When several variables normalize to the same value the last one wins.
    """
    index: Dict[str, str] = {}
    for name, value in variables.items():
        key = value.lower()
        if HEX_COLOR_PATTERN.fullmatch(key):
            key = normalize_hex(key)
        index[key] = f"${name}"
    return index


class ColorSubstituter:
    """
    Substitutes hex color literals using a variable table.

    Literals are matched case-insensitively as '#' followed by 3 to 6 hex
    digits, lowercased and normalized, then looked up by value. Unmatched
    literals and all other text are left as they are.
    """

    COLOR_PATTERN = HEX_COLOR_PATTERN

    def __init__(self, variables: Mapping[str, str]):
        """Initialize the substitutor with a variable table."""
        self.index = build_inverse_index(variables)

    def lookup(self, literal: str) -> str:
        """Return the variable reference for a literal, or '' when none matches."""
        return self.index.get(normalize_hex(literal.lower()), '')

    def _iter_substitutions(self, text: str) -> Iterator[Substitution]:
        for match in self.COLOR_PATTERN.finditer(text):
            replacement = self.lookup(match.group(0))
            if replacement:
                yield Substitution(
                    start=match.start(),
                    end=match.end(),
                    original=match.group(0),
                    replacement=replacement,
                )

    def find_substitutions(self, text: str) -> List[Substitution]:
        """
        List the replacements substitute() would make.

        Args:
            text: Document text

        Returns:
            Substitutions in document order, offsets relative to `text`
        """
        return list(self._iter_substitutions(text))

    def substitute(self, text: str) -> str:
        """
        Replace matched hex literals in a single left-to-right pass.

        Args:
            text: Document text

        Returns:
            New text; only the replaced literals differ from the input
        """
        parts: List[str] = []
        position = 0
        for substitution in self._iter_substitutions(text):
            parts.append(text[position:substitution.start])
            parts.append(substitution.replacement)
            position = substitution.end
        parts.append(text[position:])
        return ''.join(parts)


def substitute_colors(text: str, variables: Mapping[str, str]) -> str:
    """Replace hex color literals in `text` with matching `$variable` references."""
    return ColorSubstituter(variables).substitute(text)
