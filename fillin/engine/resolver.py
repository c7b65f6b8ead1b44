"""Span resolution: parse one delimited span and dispatch it to its hook."""

import logging
import re
from typing import Any

from fillin.exceptions import MalformedSpanError, NoHookError
from fillin.hooks.registry import HookRegistry


logger = logging.getLogger(__name__)


class SpanResolver:
    """
    Resolves a single span of the form LEFT <ws>* TAG PAYLOAD <ws>* RIGHT.

    The payload is handed to the hook as-is apart from trimming; escape
    markers inside it are not decoded.
    """

    def __init__(self, left_delim: str, right_delim: str, hooks: HookRegistry):
        self.hooks = hooks
        self.span_pattern = re.compile(
            re.escape(left_delim) + r'\s*([^\w\s])\s*(.*?)\s*' + re.escape(right_delim),
            re.DOTALL
        )

    def parse(self, span: str):
        """
        Split a span into its tag character and trimmed payload.

        Raises:
            MalformedSpanError: If the span does not have the required structure
        """
        match = self.span_pattern.fullmatch(span)
        if not match:
            raise MalformedSpanError(span)
        return match.group(1), match.group(2)

    def resolve(self, span: str) -> Any:
        """
        Resolve a span to its replacement value.

        Args:
            span: Full span text including both delimiters

        Returns:
            Whatever the hook returns

        Raises:
            MalformedSpanError: If the span cannot be parsed (recoverable)
            NoHookError: If no hook is registered for the tag (fatal)
        """
        tag, payload = self.parse(span)

        hook = self.hooks.get(tag)
        if hook is None:
            raise NoHookError(tag)

        logger.debug(f"Dispatching '{tag}' hook with payload {payload!r}")
        # Hook failures propagate unchanged
        return hook(payload)
