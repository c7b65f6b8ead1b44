"""
Default hook capabilities.

- `$` looks a payload up in a variable store: [[$name]]
- `&` calls an exported function: [[&name(arg1,arg2)]]
"""

import logging
import re
from typing import Any, Callable, List, Mapping

from fillin.exceptions import FunctionCallSyntaxError, UnknownFunctionError


logger = logging.getLogger(__name__)


class VariableLookupHook:
    """Resolves a payload by looking it up in a key-value store."""

    def __init__(self, variables: Mapping[str, Any]):
        self.variables = variables

    def __call__(self, payload: str) -> Any:
        if payload not in self.variables:
            logger.debug(f"Undefined template variable: {payload!r}")
            return ''
        return self.variables[payload]


class FunctionCallHook:
    """
    Resolves a payload of the form name(args) by calling an exported function.

    Only functions present in the function table are callable. Arguments are
    split on commas; commas cannot be escaped.
    """

    CALL_PATTERN = re.compile(r'(\w+)\((.*)\)')

    def __init__(self, functions: Mapping[str, Callable[..., Any]]):
        self.functions = functions

    def __call__(self, payload: str) -> Any:
        match = self.CALL_PATTERN.search(payload)
        if not match:
            raise FunctionCallSyntaxError(payload)

        name, args = match.group(1), match.group(2)
        function = self.functions.get(name)
        if function is None:
            raise UnknownFunctionError(name)

        return function(*split_args(args))


def split_args(args: str) -> List[str]:
    """
    Split a comma-separated argument string.

    An empty string yields no arguments and trailing empty fields are
    dropped, so "a,,b," gives ['a', '', 'b'].
    """
    parts = args.split(',')
    while parts and parts[-1] == '':
        parts.pop()
    return parts
