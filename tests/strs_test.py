"""Tests for `reggie_case.strs` tokenization."""

import pytest

from reggie_case import strs
from reggie_case.strs import Token


def _texts(value: str) -> list[str]:
    return [token.text for token in strs.tokenize(value)]


@pytest.mark.parametrize(
    "value, expected",
    [
        ("HelloWorld", ["Hello", "World"]),
        ("helloWorld", ["hello", "World"]),
        ("hello_world", ["hello", "world"]),
        ("field123", ["field123"]),
        ("field123Value", ["field123", "Value"]),
        ("mobileNumber", ["mobile", "Number"]),
        ("SCREEN_NAME", ["SCREEN", "NAME"]),
        ("FIELD 123 VALUE", ["FIELD", "123", "VALUE"]),
        ("  first   name  ", ["first", "name"]),
        ("a--b__c..d", ["a", "b", "c", "d"]),
        ("-leading.and.trailing-", ["leading", "and", "trailing"]),
        ("HTMLParser", ["HTMLParser"]),
    ],
)
def test_tokenize(value, expected):
    assert _texts(value) == expected


def test_empty_string_is_empty_sequence():
    assert strs.tokenize("") == ()


@pytest.mark.parametrize("value", ["---", "___", "...", "-_. !?"])
def test_separator_only_is_empty_sequence(value):
    assert strs.tokenize(value) == ()


def test_non_ascii_letters_are_separators():
    assert _texts("caféBar") == ["caf", "Bar"]


def test_tokens_are_immutable_and_deterministic():
    first = strs.tokenize("userId 42")
    second = strs.tokenize("userId 42")
    assert first == second
    assert isinstance(first, tuple)
    with pytest.raises(AttributeError):
        first[0].text = "changed"


def test_numeric_flag():
    tokens = strs.tokenize("field 123 v2")
    assert [token.numeric for token in tokens] == [False, True, False]
    assert str(tokens[1]) == "123"
    assert tokens[1] == Token("123")


def test_split_helpers_drop_empty_parts():
    assert list(strs.split_non_alpha_numeric("_a_b_", "--c")) == ["a", "b", "c"]
    assert list(strs.split_camel_case("oneTwo", "Three")) == ["one", "Two", "Three"]
