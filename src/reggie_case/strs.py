"""Tokenizer that splits text into alphanumeric word fragments.

Separators are any run of characters outside ``[A-Za-z0-9]`` plus the boundary
between a lowercase letter or digit and a following uppercase letter. Only ASCII
letters are word characters; accented and non-Latin letters act as separators.
"""

import re
from dataclasses import dataclass
from itertools import chain
from typing import Iterable

_SPLIT_NON_ALPHA_NUMERIC = re.compile(r"[^A-Za-z0-9]+")
_SPLIT_CAMEL_CASE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


@dataclass(frozen=True)
class Token:
    """Maximal alphanumeric run with its original case preserved."""

    text: str

    @property
    def numeric(self) -> bool:
        return self.text.isdigit()

    def __str__(self) -> str:
        return self.text


def tokenize(value: str) -> tuple[Token, ...]:
    """Split a validated string into an ordered tuple of tokens.

    The camel/Pascal pass runs inside each alphanumeric part, which is the same
    as marking case boundaries first since a boundary never touches a separator.

    Examples:
        >>> [t.text for t in tokenize("mobileNumber")]
        ['mobile', 'Number']
        >>> [t.text for t in tokenize("FIELD 123 VALUE")]
        ['FIELD', '123', 'VALUE']
        >>> tokenize("---")
        ()
    """
    if not value:
        return ()
    parts = split_camel_case(*split_non_alpha_numeric(value))
    return tuple(Token(part) for part in parts)


def split_non_alpha_numeric(*inputs: str) -> Iterable[str]:
    """Split inputs on runs of non-alphanumeric characters, dropping empty parts."""
    return _non_empty(
        chain.from_iterable(_SPLIT_NON_ALPHA_NUMERIC.split(s) for s in inputs)
    )


def split_camel_case(*inputs: str) -> Iterable[str]:
    """Split inputs where a lowercase letter or digit meets an uppercase letter."""
    return _non_empty(chain.from_iterable(_SPLIT_CAMEL_CASE.split(s) for s in inputs))


def _non_empty(parts: Iterable[str]) -> Iterable[str]:
    for part in parts:
        if part:
            yield part
