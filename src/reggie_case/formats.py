"""Case styles and the formatter that renders token sequences into them."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable

from reggie_case import strs


class Style(Enum):
    """Supported output styles, valued by their conventional names."""

    LOWER_CAMEL = "lowerCamel"
    PASCAL = "pascal"
    KEBAB = "kebab"
    DOT = "dot"
    SNAKE = "snake"
    CONSTANT = "constant"

    @classmethod
    def parse(cls, value: Any) -> "Style":
        """
        Resolve a style from a member or a loosely written name.

        Names are compared after tokenizing and lowercasing, so "lowerCamel",
        "lower-camel" and "LOWER_CAMEL" are equivalent, and a trailing "case"
        word is ignored ("kebab-case", "dot.case"). Exact names and aliases
        match first, then an unambiguous prefix.

        Raises
        - ValueError on unknown or ambiguous names
        """
        if isinstance(value, Style):
            return value
        words = _words(value)
        if len(words) > 1 and words[-1] == _CASE_SUFFIX:
            words = words[:-1]
        key = "".join(words)
        if not key:
            raise ValueError(f"Invalid style: {value}")
        styles = _styles()
        if style := styles.get(key):
            return style
        matched = {style for name, style in styles.items() if name.startswith(key)}
        if len(matched) == 1:
            return matched.pop()
        elif len(matched) > 1:
            raise ValueError(f"Ambiguous style: {value}")
        raise ValueError(f"Invalid style: {value}")


@dataclass(frozen=True)
class _Rule:
    separator: str
    first: Callable[[str], str]
    rest: Callable[[str], str]


_RULES = {
    Style.LOWER_CAMEL: _Rule("", str.lower, str.capitalize),
    Style.PASCAL: _Rule("", str.capitalize, str.capitalize),
    Style.KEBAB: _Rule("-", str.lower, str.lower),
    Style.DOT: _Rule(".", str.lower, str.lower),
    Style.SNAKE: _Rule("_", str.lower, str.lower),
    Style.CONSTANT: _Rule("_", str.upper, str.upper),
}

_CASE_SUFFIX = "case"
_ALIASES = {
    "camel": Style.LOWER_CAMEL,
    "upper_camel": Style.PASCAL,
    "screaming_snake": Style.CONSTANT,
}


def format(tokens: Iterable[strs.Token | str], style: Style | str) -> str:
    """
    Render tokens in the given style.

    The first token gets the style's leading transform, every later token the
    trailing one, and the results are joined with the style's separator. An
    empty sequence renders as ''. Tokens are trusted as produced by
    ``strs.tokenize``.
    """
    rule = _RULES[Style.parse(style)]
    parts = []
    for i, token in enumerate(tokens):
        text = str(token)
        parts.append(rule.first(text) if i == 0 else rule.rest(text))
    return rule.separator.join(parts)


def _styles() -> dict[str, Style]:
    styles: dict[str, Style] = {}
    for style in Style:
        for name in (style.name, style.value):
            styles.setdefault("".join(_words(name)), style)
    for name, style in _ALIASES.items():
        styles.setdefault("".join(_words(name)), style)
    return styles


def _words(value: Any) -> list[str]:
    if value is None:
        return []
    return [token.text.lower() for token in strs.tokenize(str(value))]
