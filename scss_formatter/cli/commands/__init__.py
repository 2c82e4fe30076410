"""CLI command handlers."""

from .format import format_file
from .variables import show_variables

__all__ = ['format_file', 'show_variables']
