"""Input validation and the errors raised for rejected input."""

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Reason an input was rejected before tokenization."""

    TYPE = "type"
    WHITESPACE = "whitespace"


class CaseInputError(Exception):
    """Base class for inputs that cannot be case converted."""

    kind: ErrorKind


class InputTypeError(CaseInputError, TypeError):
    """Raised when the input is ``None`` or not a ``str``."""

    kind = ErrorKind.TYPE

    def __init__(self, type_name: str, operation: str | None = None):
        self.type_name = type_name
        super().__init__(
            f"{operation or 'value'} expects a string, received {type_name}"
        )


class WhitespaceInputError(CaseInputError, ValueError):
    """Raised when the input consists only of whitespace."""

    kind = ErrorKind.WHITESPACE

    def __init__(self, operation: str | None = None):
        super().__init__(f"{operation or 'value'} expects a non-whitespace string")


def validate(value: Any, operation: str | None = None) -> str:
    """
    Return ``value`` unchanged when it is a string that can be tokenized.

    The empty string is valid. ``operation`` only names the caller in error
    messages.

    Raises:
        InputTypeError: value is None or not a string
        WhitespaceInputError: value is non-empty but only whitespace
    """
    if value is None:
        raise InputTypeError("None", operation)
    if not isinstance(value, str):
        raise InputTypeError(type(value).__name__, operation)
    if value and not value.strip():
        raise WhitespaceInputError(operation)
    return value
