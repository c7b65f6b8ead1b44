"""Fill-in template exceptions."""

from typing import List
from dataclasses import dataclass


class FillInError(Exception):
    """Base class for all fill-in errors."""


class MalformedSpanError(FillInError):
    """Raised when a span does not match the required structure.

    Recoverable: the engine logs it and substitutes the empty string.
    """

    def __init__(self, span: str):
        self.span = span
        super().__init__(f"Can't interpret template chunk '{span}'")


class NoHookError(FillInError):
    """Raised when a span's tag character has no registered hook.

    Fatal: interpretation aborts.
    """

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"No interpret hook defined for type '{tag}'")


class TemplateNotFoundError(FillInError):
    """Raised when a template cannot be found on the template path."""

    def __init__(self, name: str, search_path: List[str]):
        self.name = name
        self.search_path = search_path
        super().__init__(f"Can't find file '{name}' in {' '.join(search_path)}")


class TemplateReadError(FillInError):
    """Raised when a template file exists but cannot be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Can't open {path}: {reason}")


class FunctionCallSyntaxError(FillInError):
    """Raised by the function hook when its payload is not name(args)."""

    def __init__(self, payload: str):
        self.payload = payload
        super().__init__(f"Can't understand function call '{payload}'")


class UnknownFunctionError(FillInError):
    """Raised by the function hook for a name missing from the function table."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Undefined template function '{name}'")


@dataclass
class ValidationError:
    """Single validation error."""
    message: str
    path: str = ""


class ConfigValidationError(FillInError):
    """Raised when configuration validation fails.

    Collects every problem found so the CLI can report them together
    and map to the validation exit code.
    """

    def __init__(self, errors: List[ValidationError]):
        self.errors = errors
        self.exit_code = 2

        messages = []
        for error in errors:
            messages.append(f"Validation error: {error.message}")

        super().__init__("\n".join(messages))
