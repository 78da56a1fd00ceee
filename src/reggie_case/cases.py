"""
Public case conversion functions.

Every function validates its input, tokenizes it and formats the tokens, so all
styles share one set of word boundary rules:

- ``None`` and non-string values raise ``validators.InputTypeError``
- whitespace-only strings raise ``validators.WhitespaceInputError``
- ``''`` and separator-only strings such as ``'---'`` convert to ``''``
"""

from typing import Any

from lfp_logging import logs

from reggie_case import formats, strs, validators
from reggie_case.formats import Style

LOG = logs.logger(__name__)


def convert(value: Any, style: Style | str, operation: str | None = None) -> str:
    """
    Convert ``value`` to ``style``.

    ``style`` accepts anything ``Style.parse`` does. ``operation`` names the
    caller in validation error messages and defaults to "convert".
    """
    style = Style.parse(style)
    value = validators.validate(value, operation or "convert")
    tokens = strs.tokenize(value)
    result = formats.format(tokens, style)
    LOG.debug(f"converted - style:{style.value} tokens:{len(tokens)} result:{result}")
    return result


def to_camel_case(value: Any) -> str:
    """
    Convert to lower camelCase.

    Examples:
        >>> to_camel_case("first name")
        'firstName'
        >>> to_camel_case("SCREEN_NAME")
        'screenName'
    """
    return convert(value, Style.LOWER_CAMEL, "to_camel_case")


def to_pascal_case(value: Any) -> str:
    """Convert to PascalCase, e.g. ``'user_id'`` to ``'UserId'``."""
    return convert(value, Style.PASCAL, "to_pascal_case")


def to_kebab_case(value: Any) -> str:
    """
    Convert to kebab-case.

    Examples:
        >>> to_kebab_case("mobileNumber")
        'mobile-number'
        >>> to_kebab_case("FIELD 123 VALUE")
        'field-123-value'
    """
    return convert(value, Style.KEBAB, "to_kebab_case")


def dot_case(value: Any) -> str:
    """
    Convert to dot.case.

    Examples:
        >>> dot_case("Field 123 Value")
        'field.123.value'
    """
    return convert(value, Style.DOT, "dot_case")


def to_snake_case(value: Any) -> str:
    return convert(value, Style.SNAKE, "to_snake_case")


def to_constant_case(value: Any) -> str:
    return convert(value, Style.CONSTANT, "to_constant_case")
