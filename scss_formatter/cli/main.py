"""Main CLI entry point for the SCSS color formatter."""

import argparse
import sys
from typing import Optional

from .commands import format_file, show_variables


def add_logging_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose output'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='info',
        help='Set log level'
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the formatter CLI."""
    parser = argparse.ArgumentParser(
        prog='scss-format',
        description='Replace hex colors in SCSS files with matching variables'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Format command
    format_parser = subparsers.add_parser('format', help='Format an SCSS file in place')
    format_parser.add_argument(
        'file',
        type=str,
        help='Path to the SCSS file to format'
    )
    format_parser.add_argument(
        '--variables-path',
        type=str,
        help='Variables file relative to the workspace (overrides settings)'
    )
    format_parser.add_argument(
        '--config',
        type=str,
        help='Path to settings YAML file'
    )
    format_parser.add_argument(
        '--workspace',
        type=str,
        help='Workspace directory (default: nearest ancestor with a settings file)'
    )
    format_parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Print the result instead of saving it'
    )
    add_logging_arguments(format_parser)

    # Variables command
    variables_parser = subparsers.add_parser('variables', help='List variables in an SCSS file')
    variables_parser.add_argument(
        'file',
        type=str,
        help='Path to the SCSS variables file'
    )
    add_logging_arguments(variables_parser)

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'format':
        return format_file(parsed_args)
    elif parsed_args.command == 'variables':
        return show_variables(parsed_args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
