"""Render command implementation."""

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path
from typing import Any, Dict

import yaml

from fillin.config import FillInConfig, load_config
from fillin.engine.interpreter import InterpretationEngine, OutputMode
from fillin.exceptions import (
    ConfigValidationError,
    FillInError,
    TemplateNotFoundError,
    TemplateReadError,
    ValidationError,
)
from fillin.loader import TemplateLoader


logger = logging.getLogger(__name__)


def parse_variables(args: Namespace) -> Dict[str, Any]:
    """Parse template variables from command line arguments."""
    variables: Dict[str, Any] = {}

    # File first so --var wins on conflicts
    if args.vars_file:
        vars_file = Path(args.vars_file)
        if not vars_file.exists():
            raise FileNotFoundError(f"Variables file not found: {vars_file}")

        with open(vars_file, 'r') as f:
            if vars_file.suffix == '.json':
                file_vars = json.load(f)
            else:
                file_vars = yaml.safe_load(f)
        if not isinstance(file_vars, dict):
            raise ValueError(f"Variables file must contain an object, got {type(file_vars).__name__}")

        for key, value in file_vars.items():
            variables[str(key)] = value

    if args.var:
        for item in args.var:
            if '=' not in item:
                raise ValueError(f"Invalid variable format: {item}. Expected KEY=VALUE")
            key, value = item.split('=', 1)
            variables[key] = value

    return variables


def build_config(args: Namespace) -> FillInConfig:
    """
    Build the configuration for this run from --config and CLI overrides.

    Raises:
        ConfigValidationError: If the resulting configuration is invalid
    """
    config = load_config(args.config) if args.config else FillInConfig()

    if args.left_delim is not None:
        config.left_delim = args.left_delim
    if args.right_delim is not None:
        config.right_delim = args.right_delim
    if args.template_path:
        config.template_path = list(args.template_path)

    errors = config.validate()
    if errors:
        raise ConfigValidationError([ValidationError(message=e) for e in errors])

    return config


def render_template(args: Namespace) -> int:
    """
    Interpret a template and write the result.

    Exit codes: 0 success, 1 template or argument problem, 2 invalid config
    or fatal interpretation error.
    """
    log_level = getattr(logging, args.log_level.upper())
    if args.debug:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = build_config(args)
    except ConfigValidationError as e:
        for error in e.errors:
            logger.error(f"Validation error: {error.message}")
        return e.exit_code

    try:
        config.variables.update(parse_variables(args))
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error(str(e))
        return 1

    try:
        text = TemplateLoader(config.template_path).load(args.template)
    except (TemplateNotFoundError, TemplateReadError) as e:
        logger.error(str(e))
        return 1

    engine = InterpretationEngine(config)
    mode = OutputMode.COLLECT if args.collect else OutputMode.STREAM
    try:
        out = open(args.output, 'w', encoding='utf-8') if args.output else sys.stdout
    except OSError as e:
        logger.error(f"Cannot open output file: {e}")
        return 1

    try:
        result = engine.run(text, mode, stream=out)
        if result is not None:
            out.write(result)
    except FillInError as e:
        logger.error(f"Interpretation failed: {e}")
        return 2
    except Exception as e:
        # Hook failures abort interpretation
        logger.error(f"Hook failed: {type(e).__name__}: {e}")
        return 2
    finally:
        if out is not sys.stdout:
            out.close()
        else:
            out.flush()

    return 0
