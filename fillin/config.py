"""
Template configuration: delimiters, escape marker, template path and hooks.

Each template or engine holds its own FillInConfig. Those created without one
share a process-wide default, so hooks registered on the default are visible
everywhere; clone() it for an isolated copy.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from fillin.exceptions import ValidationError, ConfigValidationError
from fillin.hooks.registry import HookRegistry


logger = logging.getLogger(__name__)

DEFAULT_LEFT_DELIM = '[['
DEFAULT_RIGHT_DELIM = ']]'
DEFAULT_ESCAPE = '\\'
DEFAULT_TEMPLATE_PATH = ['.']


@dataclass
class FillInConfig:
    """
    Configuration for interpreting templates.

    Attributes:
        left_delim: Literal opening a span
        right_delim: Literal closing a span
        escape: Marker that makes a following delimiter literal
        template_path: Directories searched for named templates, in order
        hooks: Hook registry, including the `$` store and `&` function table
    """
    left_delim: str = DEFAULT_LEFT_DELIM
    right_delim: str = DEFAULT_RIGHT_DELIM
    escape: str = DEFAULT_ESCAPE
    template_path: List[str] = field(default_factory=lambda: list(DEFAULT_TEMPLATE_PATH))
    hooks: HookRegistry = field(default_factory=HookRegistry)

    @property
    def variables(self) -> Dict[str, Any]:
        """Variable store used by the `$` hook."""
        return self.hooks.variables

    @property
    def functions(self) -> Dict[str, Any]:
        """Function table used by the `&` hook."""
        return self.hooks.functions

    def validate(self) -> List[str]:
        """
        Validate the configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        for name in ('left_delim', 'right_delim'):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                errors.append(f"'{name}' must be a non-empty string")
            elif isinstance(self.escape, str) and self.escape and self.escape in value:
                errors.append(f"'{name}' must not contain the escape marker {self.escape!r}")

        if self.left_delim == self.right_delim:
            errors.append("'left_delim' and 'right_delim' must differ")

        if not isinstance(self.escape, str) or len(self.escape) != 1:
            errors.append("'escape' must be a single character")

        if not isinstance(self.template_path, list) or \
                not all(isinstance(d, str) for d in self.template_path):
            errors.append("'template_path' must be a list of directory strings")

        return errors

    def clone(self) -> 'FillInConfig':
        """Create an independent copy with its own hook registry."""
        return FillInConfig(
            left_delim=self.left_delim,
            right_delim=self.right_delim,
            escape=self.escape,
            template_path=list(self.template_path),
            hooks=self.hooks.clone()
        )


_default_config: Optional[FillInConfig] = None


def get_default_config() -> FillInConfig:
    """Return the shared default configuration, creating it on first use."""
    global _default_config
    if _default_config is None:
        _default_config = FillInConfig()
    return _default_config


def reset_default_config() -> FillInConfig:
    """Replace the shared default configuration with a fresh one."""
    global _default_config
    _default_config = FillInConfig()
    return _default_config


class ConfigLoader:
    """Loads and validates YAML configuration files."""

    KNOWN_FIELDS = {'left_delim', 'right_delim', 'escape', 'template_path', 'variables'}

    def __init__(self):
        self.errors: List[ValidationError] = []

    def load(self, config_path: Union[str, Path], base: Optional[FillInConfig] = None) -> FillInConfig:
        """
        Load a configuration file.

        Args:
            config_path: Path to a YAML mapping
            base: Configuration to start from (a fresh one if omitted); not modified

        Returns:
            New configuration with the file's settings applied

        Raises:
            ConfigValidationError: If the file cannot be loaded or is invalid
        """
        self.errors = []
        path = Path(config_path)
        data: Any = None

        try:
            with open(path, 'r') as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            self._add_error(f"Failed to load config: {e}")
            self._raise_validation_errors()

        if data is None:
            data = {}
        if not isinstance(data, dict):
            self._add_error("Config must be a YAML object/dictionary")
            self._raise_validation_errors()

        for key in data:
            if key not in self.KNOWN_FIELDS:
                self._add_error(f"Unknown field '{key}'", str(key))

        variables = data.get('variables', {})
        if variables is None:
            variables = {}
        if not isinstance(variables, dict):
            self._add_error("'variables' must be a mapping", 'variables')
            variables = {}

        template_path = data.get('template_path')
        if isinstance(template_path, str):
            template_path = [template_path]

        config = base.clone() if base is not None else FillInConfig()
        for name in ('left_delim', 'right_delim', 'escape'):
            if name in data:
                setattr(config, name, data[name])
        if template_path is not None:
            config.template_path = template_path
        config.variables.update({str(k): v for k, v in variables.items()})

        for message in config.validate():
            self._add_error(message)

        if self.errors:
            self._raise_validation_errors()

        logger.debug(f"Loaded config from {path}")
        return config

    def _add_error(self, message: str, path: str = ""):
        self.errors.append(ValidationError(message=message, path=path))

    def _raise_validation_errors(self):
        raise ConfigValidationError(self.errors)


def load_config(config_path: Union[str, Path], base: Optional[FillInConfig] = None) -> FillInConfig:
    """Load a YAML configuration file. See ConfigLoader.load."""
    return ConfigLoader().load(config_path, base)
