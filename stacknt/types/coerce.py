"""Default-on-mismatch conversions for Stack NT values.

Every builtin reads its operands through these functions, so a type mismatch
never fails: it degrades to 0.0, "", False or a one-element block.
"""

from __future__ import annotations

import json
import math
import sys

import numpy as np

from stacknt import Value, Program
from stacknt.types.function import UserDefined
from stacknt.types.nil import NullType
from stacknt.types.symbol import Symbol

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def to_number(value: Value) -> float:
    """Number -> itself, anything else -> 0.0."""
    # bool is not a Number even though Python treats it as an int
    if isinstance(value, float):
        return float(value)
    return 0.0


def to_string(value: Value) -> str:
    """String and Symbol -> their text, Number -> canonical rendering, else ""."""
    match value:
        case str():
            return value
        case Symbol(name):
            return name
        case float():
            return render_number(value)
        case _:
            return ""


def to_bool(value: Value) -> bool:
    """Bool -> itself, anything else -> False."""
    return value if isinstance(value, bool) else False


def to_block(value: Value) -> Program:
    """Block -> a copy of itself, any scalar -> a block wrapping it."""
    if isinstance(value, list):
        return list(value)
    return [value]


def to_level(number: float) -> int:
    """Truncate to a non-negative frame count, saturating at the edges."""
    if math.isnan(number) or number <= 0:
        return 0
    if math.isinf(number):
        return sys.maxsize
    return int(number)


def to_exit_code(number: float) -> int:
    """Truncate to a signed 32-bit status, saturating at the edges."""
    if math.isnan(number):
        return 0
    if number >= _I32_MAX:
        return _I32_MAX
    if number <= _I32_MIN:
        return _I32_MIN
    return int(number)


def render_number(number: float) -> str:
    """Shortest round-trip digits in positional notation: 5.0 -> "5", 1e20 -> "100000000000000000000"."""
    if math.isnan(number):
        return "NaN"
    return np.format_float_positional(number, trim="-")


# -------------------------------
# Debug rendering (REPL stack display)
# -------------------------------
def _debug_number(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    text = repr(number)
    if "e" in text:
        mantissa, exponent = text.split("e")
        text = f"{mantissa}e{int(exponent)}"
    return text


def describe(value: Value) -> str:
    """Tagged rendering of a value, e.g. Number(5.0) or Block([String("a")])."""
    match value:
        case bool():
            return f"Bool({'true' if value else 'false'})"
        case float():
            return f"Number({_debug_number(value)})"
        case str():
            return f"String({json.dumps(value, ensure_ascii=False)})"
        case Symbol(name):
            return f"Symbol({json.dumps(name, ensure_ascii=False)})"
        case list():
            return f"Block({describe_stack(value)})"
        case UserDefined(body):
            return f"Function(UserDefined({describe_stack(body)}))"
        case NullType():
            return "Null"
        case _ if callable(value):
            name = getattr(value, "__name__", type(value).__name__)
            return f"Function(BuiltIn({name}))"
        case _:
            return repr(value)


def describe_stack(values: Program) -> str:
    return "[" + ", ".join(describe(v) for v in values) + "]"
