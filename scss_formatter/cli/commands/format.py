"""Format command implementation."""

import logging
import sys
from argparse import Namespace
from pathlib import Path

from scss_formatter.config import ConfigLoader, FormatterConfig
from scss_formatter.exceptions import ConfigValidationError, FormatterError
from scss_formatter.formatter import format_document, load_document, write_document


logger = logging.getLogger(__name__)


def configure_logging(args: Namespace) -> None:
    """Set up logging from --log-level, --debug, --quiet and --verbose."""
    log_level = getattr(logging, args.log_level.upper())
    if args.debug:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR
    elif args.verbose:
        log_level = logging.DEBUG

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def load_config(args: Namespace, workspace) -> FormatterConfig:
    """Load settings and apply the --variables-path override."""
    if workspace is not None:
        config = ConfigLoader(workspace).load(Path(args.config) if args.config else None)
    elif args.config:
        config_path = Path(args.config)
        config = ConfigLoader(config_path.parent).load(config_path)
    else:
        config = FormatterConfig()

    if args.variables_path:
        config.variables_path = args.variables_path
    return config


def format_file(args: Namespace) -> int:
    """
    Replace hex colors in an SCSS file with variable references.

    Exit codes: 0 on success, 1 on I/O failure, 2 on configuration errors.
    """
    configure_logging(args)

    try:
        document_path = Path(args.file).resolve()
        if not document_path.is_file():
            logger.error(f"File not found: {document_path}")
            return 1

        workspace = Path(args.workspace) if args.workspace else None
        context = load_document(document_path, workspace)
        config = load_config(args, context.base_directory)

        result = format_document(config, context)
        logger.info(
            f"Replaced {len(result.substitutions)} color(s) using "
            f"{len(result.variables)} variable(s)"
        )

        if args.dry_run:
            if result.changed:
                logger.info(f"[DRY RUN] Would update: {document_path}")
            else:
                logger.info(f"[DRY RUN] No changes: {document_path}")
            # undecodable source bytes are shown as U+FFFD
            sys.stdout.write(result.text.encode('utf-8', 'surrogateescape').decode('utf-8', 'replace'))
            return 0

        if result.changed:
            write_document(document_path, result.text)
            logger.info(f"Saved {document_path}")
        else:
            logger.info(f"No changes: {document_path}")
        return 0

    except ConfigValidationError as e:
        for error in e.errors:
            logger.error(f"Validation error: {error.message}")
        return e.exit_code
    except FormatterError as e:
        logger.error(e.message)
        return e.exit_code
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"I/O error: {e}")
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1
