"""
SCSS variable extraction.
Collects flat `$name: value;` declarations into an ordered name -> value table.
"""

import re
from typing import Dict


class VariableExtractor:
    """
    Extracts SCSS variable declarations from source text.

    Only flat declarations are recognised. Anything shaped like a declaration
    is taken, including text inside comments and strings; nested rules, maps
    and interpolation are not understood.
    """

    # $name: value;  -- value runs up to the next semicolon
    DECLARATION_PATTERN = re.compile(r'\$([\w-]+):\s*([^;]+);')

    def extract(self, scss_text: str) -> Dict[str, str]:
        """
        Extract variables from SCSS text.

        Args:
            scss_text: SCSS source

        Returns:
            Mapping of variable name to trimmed value, in declaration order.
            A later declaration of the same name overwrites the earlier value.
        """
        variables: Dict[str, str] = {}
        for match in self.DECLARATION_PATTERN.finditer(scss_text):
            variables[match.group(1)] = match.group(2).strip()
        return variables


def extract_variables(scss_text: str) -> Dict[str, str]:
    """Extract `$name: value;` declarations from SCSS text."""
    return VariableExtractor().extract(scss_text)
