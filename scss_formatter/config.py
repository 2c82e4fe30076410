"""Settings loading and validation for the formatter."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from scss_formatter.exceptions import ValidationError, ConfigValidationError


logger = logging.getLogger(__name__)

SETTINGS_FILENAME = ".scss-formatter.yaml"


@dataclass
class FormatterConfig:
    """Formatter settings."""
    variables_path: Optional[str] = None


class ConfigLoader:
    """Loads formatter settings from a YAML file in the workspace."""

    SECTION = 'scssColors'
    KNOWN_FIELDS = {'scssColors', 'variablesPath', 'variables_path'}
    SECTION_FIELDS = {'variablesPath'}

    def __init__(self, workspace: Path):
        """Initialize loader with workspace root."""
        self.workspace = Path(workspace)
        self.errors: List[ValidationError] = []

    def load(self, config_path: Optional[Path] = None) -> FormatterConfig:
        """
        Load settings.

        Args:
            config_path: Explicit settings file. Defaults to the settings file
                in the workspace root, which may be absent.

        Returns:
            FormatterConfig; variables_path is None when nothing is configured

        Raises:
            ConfigValidationError: If the file cannot be parsed or has an
                invalid shape. An explicit config_path that does not exist is
                also an error.
        """
        self.errors = []

        if config_path is None:
            config_path = self.workspace / SETTINGS_FILENAME
            if not config_path.exists():
                logger.debug(f"No settings file at {config_path}")
                return FormatterConfig()
        elif not Path(config_path).exists():
            self._add_error(f"Settings file not found: {config_path}")
            self._raise_validation_errors()

        logger.debug(f"Loading settings: {config_path}")
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                settings = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            self._add_error(f"Failed to load settings: {e}")
            self._raise_validation_errors()

        if settings is None:
            return FormatterConfig()

        if not isinstance(settings, dict):
            self._add_error("Settings must be a YAML object/dictionary")
            self._raise_validation_errors()

        config = FormatterConfig(variables_path=self._read_variables_path(settings))

        if self.errors:
            self._raise_validation_errors()

        return config

    def _read_variables_path(self, settings: Dict[str, Any]) -> Optional[str]:
        for key in settings.keys():
            if key not in self.KNOWN_FIELDS:
                self._add_error(f"Unknown field '{key}'", path=str(key))

        value = None
        if self.SECTION in settings:
            section = settings[self.SECTION]
            if section is None:
                section = {}
            if not isinstance(section, dict):
                self._add_error(f"'{self.SECTION}' must be a dictionary", path=self.SECTION)
            else:
                for key in section.keys():
                    if key not in self.SECTION_FIELDS:
                        self._add_error(
                            f"Unknown field '{key}' in '{self.SECTION}'",
                            path=f"{self.SECTION}.{key}"
                        )
                value = section.get('variablesPath')

        # Flat keys are accepted as a shorthand; the section wins if both are set
        if value is None:
            value = settings.get('variablesPath', settings.get('variables_path'))

        if value is not None and not isinstance(value, str):
            self._add_error(
                f"'variablesPath' must be a string, got {type(value).__name__}",
                path='variablesPath'
            )
            return None

        return value

    def _add_error(self, message: str, path: str = ""):
        self.errors.append(ValidationError(message=message, path=path))

    def _raise_validation_errors(self):
        raise ConfigValidationError(self.errors)
