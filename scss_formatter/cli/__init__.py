"""Command-line interface for the SCSS color formatter."""
