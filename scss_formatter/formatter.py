"""
Format operation: replace hex colors in an SCSS document with variables.

Ties the pure transforms in scss_formatter.variables to file I/O. Every check
runs before anything is written, and the write-back is a single atomic
replace of the whole document.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from scss_formatter.config import FormatterConfig, SETTINGS_FILENAME
from scss_formatter.exceptions import (
    ConfigMissingError,
    FileUnreadableError,
    WorkspaceContextMissingError,
    WrongDocumentTypeError,
)
from scss_formatter.variables import ColorSubstituter, Substitution, extract_variables


logger = logging.getLogger(__name__)

SCSS_KIND = "scss"


@dataclass
class DocumentContext:
    """The target document and the directory its settings are relative to."""
    base_directory: Optional[Path]
    document_text: str
    document_kind: str
    document_path: Optional[Path] = None


@dataclass
class FormatResult:
    """Outcome of formatting one document."""
    text: str
    substitutions: List[Substitution] = field(default_factory=list)
    variables: Dict[str, str] = field(default_factory=dict)

    @property
    def changed(self) -> bool:
        return bool(self.substitutions)


def read_scss_file(path: Union[str, Path]) -> Optional[str]:
    """
    Read an SCSS file as UTF-8 text.

    Returns:
        File contents, or None if the file cannot be read. The cause is logged.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading SCSS file: {e}")
        return None


def write_document(path: Path, text: str) -> None:
    """
    Replace the document contents atomically (temp file + rename).

    The temp file is removed if writing or renaming fails. Undecodable bytes
    kept by load_document are written back unchanged.
    """
    path = Path(path)
    temp_file = path.with_name(path.name + '.tmp')
    try:
        with open(temp_file, 'w', encoding='utf-8', errors='surrogateescape', newline='') as f:
            f.write(text)
        temp_file.replace(path)
    except Exception:
        temp_file.unlink(missing_ok=True)
        raise


def document_kind_for(path: Union[str, Path]) -> str:
    """Derive a document kind from a file suffix ('scss', 'css', ...)."""
    suffix = Path(path).suffix.lower().lstrip('.')
    return suffix or "plaintext"


def resolve_workspace(document_path: Path, workspace: Optional[Path] = None) -> Optional[Path]:
    """
    Find the base directory for a document.

    An explicit workspace is used when the document lies inside it. Without
    one, the nearest ancestor holding a settings file is used.

    Returns:
        Workspace directory, or None if none applies
    """
    document_abs = Path(document_path).resolve()

    if workspace is not None:
        workspace_abs = Path(workspace).resolve()
        if not workspace_abs.is_dir():
            return None
        try:
            document_abs.relative_to(workspace_abs)
        except ValueError:
            return None
        return workspace_abs

    for parent in document_abs.parents:
        if (parent / SETTINGS_FILENAME).is_file():
            return parent
    return None


def load_document(path: Path, workspace: Optional[Path] = None) -> DocumentContext:
    """
    Build a DocumentContext for a file on disk.

    Bytes that are not valid UTF-8 are carried through as surrogates, so the
    format checks still run in order and such bytes survive a rewrite.
    """
    path = Path(path)
    with open(path, 'r', encoding='utf-8', errors='surrogateescape', newline='') as f:
        text = f.read()
    return DocumentContext(
        base_directory=resolve_workspace(path, workspace),
        document_text=text,
        document_kind=document_kind_for(path),
        document_path=path,
    )


def format_document(
    config: FormatterConfig,
    context: DocumentContext,
    reader: Callable[[Path], Optional[str]] = read_scss_file,
) -> FormatResult:
    """
    Replace hex colors in the context's document with variable references.

    Args:
        config: Settings; variables_path is relative to the base directory
        context: Target document
        reader: Returns file text or None on failure

    Returns:
        FormatResult with the new text and the substitutions made

    Raises:
        ConfigMissingError: No variables path configured
        WorkspaceContextMissingError: No base directory
        FileUnreadableError: The variables file could not be read
        WrongDocumentTypeError: The document is not SCSS
    """
    if not config.variables_path:
        raise ConfigMissingError()

    if not context.base_directory:
        raise WorkspaceContextMissingError()

    variables_file = Path(context.base_directory) / config.variables_path
    scss_content = reader(variables_file)
    if scss_content is None:
        raise FileUnreadableError(variables_file)

    variables = extract_variables(scss_content)
    logger.debug(f"Extracted {len(variables)} variables from {variables_file}")

    if context.document_kind != SCSS_KIND:
        raise WrongDocumentTypeError(context.document_kind)

    substituter = ColorSubstituter(variables)
    substitutions = substituter.find_substitutions(context.document_text)
    for substitution in substitutions:
        logger.debug(
            f"{substitution.original} -> {substitution.replacement} at offset {substitution.start}"
        )

    return FormatResult(
        text=substituter.substitute(context.document_text),
        substitutions=substitutions,
        variables=variables,
    )
