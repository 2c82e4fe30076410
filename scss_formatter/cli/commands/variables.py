"""Variables command: print the variable table of an SCSS file as JSON."""

import json
import logging
import sys
from argparse import Namespace

from scss_formatter.cli.commands.format import configure_logging
from scss_formatter.formatter import read_scss_file
from scss_formatter.variables import extract_variables


logger = logging.getLogger(__name__)


def show_variables(args: Namespace) -> int:
    configure_logging(args)

    scss_content = read_scss_file(args.file)
    if scss_content is None:
        return 1

    variables = extract_variables(scss_content)
    logger.info(f"Found {len(variables)} variable(s) in {args.file}")
    json.dump(variables, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0
