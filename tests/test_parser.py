import math

import pytest
from hypothesis import given, strategies as st

from stacknt.reader.parser import parse, parse_token, is_number
from stacknt.types.coerce import render_number
from stacknt.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("3.14", [3.14]),
        ('"ab"', ["ab"]),
        ("{ 1 2 }", [[1.0, 2.0]]),
        ("{ }", [[]]),
        ("{}", [[]]),
        ("add", [Symbol("add")]),
        ("-5", [-5.0]),
        ("+5", [5.0]),
        (".5 5. 1e3 2E-2", [0.5, 5.0, 1000.0, 0.02]),
        ('"a b" x', ["a b", Symbol("x")]),
        ('""', [""]),
        ("{ 1 { 2 \"s\" } sym }", [[1.0, [2.0, "s"], Symbol("sym")]]),
        ("if-else", [Symbol("if-else")]),
    ],
)
def test_parse(source, expected):
    assert parse(source) == expected


def test_numbers_parse_as_floats():
    (value,) = parse("42")
    assert type(value) is float


def test_string_keeps_backslashes_verbatim():
    assert parse(r'"a\nb"') == [r"a\nb"]


@pytest.mark.parametrize(
    "token",
    ["inf", "-inf", "Infinity", "NaN", "nan"],
)
def test_special_float_words(token):
    (value,) = parse(token)
    assert isinstance(value, float)
    assert math.isinf(value) or math.isnan(value)


@pytest.mark.parametrize(
    "token",
    ["1_000", "0x10", ".", "e5", "1e", "--1", "1.2.3", "five", "true", "٣", "١.٥", "３"],
)
def test_not_numbers(token):
    assert not is_number(token)
    assert parse_token(token) == Symbol(token)


def test_brace_symbol_is_not_a_block():
    assert parse("x{y}") == [Symbol("x{y}")]


def test_quote_inside_block_becomes_string():
    assert parse('{ "a b" }') == [["a b"]]


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_rendered_numbers_parse_back(x):
    assert parse(render_number(x)) == [x]


@given(st.text(alphabet=st.characters(exclude_characters='"'), max_size=30))
def test_quoted_text_is_kept_verbatim(text):
    assert parse('"' + text + '"') == [text]
