"""Formatter exceptions."""

from typing import List
from dataclasses import dataclass


@dataclass
class ValidationError:
    """Single settings validation error."""
    message: str
    path: str = ""
    exit_code: int = 2


class ConfigValidationError(Exception):
    """Raised when the settings file is malformed.

    The loader collects every problem before raising, so the CLI can report
    them all at once and map to the configuration exit code.
    """

    def __init__(self, errors: List[ValidationError]):
        self.errors = errors
        self.exit_code = 2

        messages = []
        for error in errors:
            messages.append(f"Validation error: {error.message}")

        super().__init__("\n".join(messages))


class FormatterError(Exception):
    """Base class for recoverable failures of the format operation."""

    exit_code = 1

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigMissingError(FormatterError):
    """The variables path setting is not configured."""

    exit_code = 2

    def __init__(self, message: str = (
        "config not found, should set scssColors.variablesPath in settings"
    )):
        super().__init__(message)


class WorkspaceContextMissingError(FormatterError):
    """No base directory could be resolved for the target document."""

    exit_code = 2

    def __init__(self, message: str = "No workspace folder found."):
        super().__init__(message)


class FileUnreadableError(FormatterError):
    """The SCSS variables file could not be read."""

    exit_code = 1

    def __init__(self, path, message: str = "Error reading SCSS file."):
        self.path = path
        super().__init__(f"{message} ({path})")


class WrongDocumentTypeError(FormatterError):
    """The target document is not an SCSS document."""

    exit_code = 2

    def __init__(self, document_kind: str):
        self.document_kind = document_kind
        super().__init__(
            f"This command can only be used on SCSS files (got '{document_kind}')."
        )
