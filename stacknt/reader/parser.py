"""
  Stack NT parser

Turns tokens into a program, a flat list of values:

    - numbers       -> float
    - "strings"     -> str (outer quotes removed, no escape processing)
    - { blocks }    -> list (inner text parsed recursively)
    - anything else -> Symbol

Classification follows that order, so a numeric-looking token is always a
number.
"""

from __future__ import annotations

import re

from stacknt import Value, Program
from stacknt.reader.tokenizer import tokenize
from stacknt.types.symbol import Symbol

# Plain ASCII decimal floats plus inf/infinity/nan. Python's float() alone would
# also accept underscores ("1_0") and non-ASCII digits, which are symbols here.
NUMBER_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE | re.ASCII,
)


def is_number(token: str) -> bool:
    return NUMBER_RE.fullmatch(token) is not None


def parse_token(token: str) -> Value:
    """Classify a single stripped token."""
    if is_number(token):
        return float(token)
    if token.startswith('"') and token.endswith('"'):
        return token[1:-1]
    if token.startswith("{") and token.endswith("}"):
        return parse(token[1:-1])
    return Symbol(token)


def parse(source: str) -> Program:
    """Parse `source` into a program."""
    return [parse_token(token.strip()) for token in tokenize(source)]
