"""
Fill-in templates: text with [[ $spans ]] rewritten by pluggable hooks.
"""

from .config import FillInConfig, get_default_config, reset_default_config, load_config
from .engine import InterpretationEngine, OutputMode
from .exceptions import (
    FillInError,
    MalformedSpanError,
    NoHookError,
    TemplateNotFoundError,
    TemplateReadError,
    ConfigValidationError,
)
from .hooks import HookRegistry
from .template import Template

__version__ = "0.2.0"

__all__ = [
    "FillInConfig",
    "get_default_config",
    "reset_default_config",
    "load_config",
    "InterpretationEngine",
    "OutputMode",
    "FillInError",
    "MalformedSpanError",
    "NoHookError",
    "TemplateNotFoundError",
    "TemplateReadError",
    "ConfigValidationError",
    "HookRegistry",
    "Template",
]
