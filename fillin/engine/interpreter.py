"""
Interpretation engine.

Drives the scan/resolve loop over a working copy of the template text:

- plain text before the first structural left delimiter is final, so it is
  normalized and emitted immediately
- the innermost complete span (first unescaped right delimiter, paired with
  the nearest unescaped left delimiter before it) is resolved and its
  replacement spliced back into the buffer
- scanning restarts at the beginning of the buffer, so replacement text may
  itself contain delimiters that get interpreted

Streaming and collecting modes run the same loop and differ only in where
finished text goes.
"""

import logging
import sys
from enum import Enum
from typing import Any, Callable, List, Optional, TextIO

from fillin.config import FillInConfig, get_default_config
from fillin.exceptions import ConfigValidationError, MalformedSpanError, ValidationError
from .resolver import SpanResolver
from .scanner import real_index, unquote


logger = logging.getLogger(__name__)


class OutputMode(str, Enum):
    """Where finished plain text goes."""
    COLLECT = "collect"
    STREAM = "stream"


class InterpretationEngine:
    """Interprets template text against one configuration."""

    def __init__(self, config: Optional[FillInConfig] = None):
        """
        Initialize the engine.

        Args:
            config: Delimiters and hooks to use (shared default if omitted)
        """
        self.config = config if config is not None else get_default_config()

    def interpret(self, text: str) -> str:
        """Interpret text and return the collected result."""
        return self.run(text, OutputMode.COLLECT)

    def interpret_to(self, text: str, stream: Optional[TextIO] = None) -> None:
        """Interpret text, writing each finished chunk to a stream (stdout by default)."""
        self.run(text, OutputMode.STREAM, stream=stream)

    def run(
        self,
        text: str,
        mode: OutputMode = OutputMode.COLLECT,
        stream: Optional[TextIO] = None
    ) -> Optional[str]:
        """
        Interpret text in the given output mode.

        Args:
            text: Template text; never modified
            mode: Collect into a string or stream to a text stream
            stream: Stream for STREAM mode (defaults to sys.stdout)

        Returns:
            The interpreted text in COLLECT mode, None in STREAM mode

        Raises:
            ConfigValidationError: The configuration is invalid
            NoHookError: A span used a tag with no registered hook
            Exception: Anything raised by a hook propagates unchanged
        """
        errors = self.config.validate()
        if errors:
            raise ConfigValidationError([ValidationError(message=e) for e in errors])

        if mode == OutputMode.STREAM:
            out = stream if stream is not None else sys.stdout
            self._interpret(text, out.write)
            return None

        chunks: List[str] = []
        self._interpret(text, chunks.append)
        return ''.join(chunks)

    def _interpret(self, text: str, emit: Callable[[str], Any]) -> None:
        left = self.config.left_delim
        right = self.config.right_delim
        escape = self.config.escape
        resolver = SpanResolver(left, right, self.config.hooks)

        while True:
            logger.debug(f"Interpreting {text!r}")

            first_left = real_index(text, left, escape=escape)
            if first_left == -1:
                if text:
                    emit(unquote(text, left, right, escape))
                return
            if first_left > 0:
                emit(unquote(text[:first_left], left, right, escape))
                text = text[first_left:]
                continue

            first_right = real_index(text, right, escape=escape)
            last_left = -1
            if first_right != -1:
                last_left = real_index(text[:first_right], left, last=True, escape=escape)
            logger.debug(f"First right at {first_right}, last left at {last_left}")

            if last_left == -1:
                # No span can be closed; give back the rest untouched
                logger.warning(f"Problem interpreting text {text!r}: no matching '{right}'")
                emit(text)
                return

            end = first_right + len(right)
            span = text[last_left:end]
            try:
                replacement = self._to_text(resolver.resolve(span))
            except MalformedSpanError as e:
                logger.warning(str(e))
                replacement = ''

            text = text[:last_left] + replacement + text[end:]

    @staticmethod
    def _to_text(value: Any) -> str:
        """Convert a hook's return value to replacement text."""
        if value is None:
            return ''
        if isinstance(value, str):
            return value
        return str(value)
