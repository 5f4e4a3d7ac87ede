"""Built-in operations for the Stack NT runtime environment.

Every builtin takes the interpreter session, pops its operands (topmost first)
and pushes its results. Operands are read through the coercions in
stacknt.types.coerce, so no builtin ever fails on a type mismatch.
"""
from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import numpy as np

from stacknt import Value
from stacknt.evaluation.evaluator import evaluate
from stacknt.types.coerce import (
    to_block,
    to_bool,
    to_exit_code,
    to_level,
    to_number,
    to_string,
)
from stacknt.types.environment import Environment
from stacknt.types.function import UserDefined
from stacknt.types.symbol import Symbol

if TYPE_CHECKING:
    from stacknt.interpreter import Interpreter

log = logging.getLogger(__name__)


def _pop_numbers(interp: Interpreter) -> tuple[float, float]:
    b = to_number(interp.pop())
    a = to_number(interp.pop())
    return a, b


def _pop_strings(interp: Interpreter) -> tuple[str, str]:
    b = to_string(interp.pop())
    a = to_string(interp.pop())
    return a, b


def _pop_bools(interp: Interpreter) -> tuple[bool, bool]:
    b = to_bool(interp.pop())
    a = to_bool(interp.pop())
    return a, b


def _float_op(op, a: float, b: float) -> float:
    # IEEE results (inf/NaN) instead of ZeroDivisionError or complex powers
    with np.errstate(all="ignore"):
        return float(op(a, b))


# -------------------------------
# Arithmetic
# -------------------------------
def add(interp: Interpreter) -> None:
    """a b + -> a + b"""
    a, b = _pop_numbers(interp)
    interp.push(_float_op(np.add, a, b))


def sub(interp: Interpreter) -> None:
    """a b - -> a - b"""
    a, b = _pop_numbers(interp)
    interp.push(_float_op(np.subtract, a, b))


def mul(interp: Interpreter) -> None:
    """a b * -> a * b"""
    a, b = _pop_numbers(interp)
    interp.push(_float_op(np.multiply, a, b))


def div(interp: Interpreter) -> None:
    """a b / -> a / b; division by zero gives inf or NaN."""
    a, b = _pop_numbers(interp)
    interp.push(_float_op(np.divide, a, b))


def mod(interp: Interpreter) -> None:
    """a b % -> remainder with the sign of a (C fmod); NaN for b = 0."""
    a, b = _pop_numbers(interp)
    interp.push(_float_op(np.fmod, a, b))


def power(interp: Interpreter) -> None:
    """a b ^ -> a raised to b; NaN for a negative base with a fractional exponent."""
    a, b = _pop_numbers(interp)
    interp.push(_float_op(np.power, a, b))


# -------------------------------
# Comparison and logic
# -------------------------------
def equals(interp: Interpreter) -> None:
    """Compare the textual renderings of the two topmost values."""
    a, b = _pop_strings(interp)
    interp.push(a == b)


def not_equals(interp: Interpreter) -> None:
    a, b = _pop_strings(interp)
    interp.push(a != b)


def logical_and(interp: Interpreter) -> None:
    # No short-circuit: both operands are always popped
    a, b = _pop_bools(interp)
    interp.push(a and b)


def logical_or(interp: Interpreter) -> None:
    a, b = _pop_bools(interp)
    interp.push(a or b)


# -------------------------------
# Strings and output
# -------------------------------
def concat(interp: Interpreter) -> None:
    """a b concat -> "ab" """
    a, b = _pop_strings(interp)
    interp.push(a + b)


def print_builtin(interp: Interpreter) -> None:
    """Write the topmost value to stdout without a newline."""
    print(to_string(interp.pop()), end="", flush=True)


def println_builtin(interp: Interpreter) -> None:
    """Write the topmost value to stdout followed by a newline."""
    print(to_string(interp.pop()))


# -------------------------------
# Control flow
# -------------------------------
def if_else(interp: Interpreter) -> None:
    """cond {then} {else} if-else"""
    code_false = to_block(interp.pop())
    code_true = to_block(interp.pop())
    condition = to_bool(interp.pop())
    evaluate(interp, code_true if condition else code_false)


def when(interp: Interpreter) -> None:
    """cond {then} when"""
    code_true = to_block(interp.pop())
    condition = to_bool(interp.pop())
    if condition:
        evaluate(interp, code_true)


def while_loop(interp: Interpreter) -> None:
    """{cond} {body} while

    The condition block runs again before every iteration and must leave a
    fresh boolean on the stack each time.
    """
    code_true = to_block(interp.pop())
    condition = to_block(interp.pop())
    while True:
        evaluate(interp, condition)
        if not to_bool(interp.pop()):
            break
        evaluate(interp, code_true)


def return_builtin(interp: Interpreter) -> None:
    """n return: unwind n frames, the current one included."""
    interp.returns = to_level(to_number(interp.pop()))


def eval_builtin(interp: Interpreter) -> None:
    """Evaluate the topmost value inline; a scalar acts as a one-item block."""
    evaluate(interp, to_block(interp.pop()))


def exit_builtin(interp: Interpreter) -> None:
    """Terminate the process with the popped status."""
    code = to_exit_code(to_number(interp.pop()))
    log.debug("exit requested with status %d", code)
    sys.stdout.flush()
    raise SystemExit(code)


# -------------------------------
# Definitions and stack
# -------------------------------
def let(interp: Interpreter) -> None:
    """value "name" let"""
    name = to_string(interp.pop())
    value = interp.pop()
    log.debug("let %s", name)
    interp.env.define(Symbol(name), value)


def defun(interp: Interpreter) -> None:
    """{body} "name" defun"""
    name = to_string(interp.pop())
    body = to_block(interp.pop())
    log.debug("defun %s", name)
    interp.env.define(Symbol(name), UserDefined(body))


def pop(interp: Interpreter) -> None:
    interp.pop()


CONSTANTS: dict[str, Value] = {
    "new-line": "\n",
    "double-quote": '"',
    "tab": "\t",
    "true": True,
    "false": False,
}


def register(env: Environment) -> None:
    """Register all builtin operations and constants into the given environment."""
    env.update(
        {
            Symbol("+"): add,
            Symbol("-"): sub,
            Symbol("*"): mul,
            Symbol("/"): div,
            Symbol("%"): mod,
            Symbol("^"): power,
            Symbol("="): equals,
            Symbol("!="): not_equals,
            Symbol("&"): logical_and,
            Symbol("|"): logical_or,
            Symbol("concat"): concat,
            Symbol("print"): print_builtin,
            Symbol("println"): println_builtin,
            Symbol("if-else"): if_else,
            Symbol("when"): when,
            Symbol("while"): while_loop,
            Symbol("return"): return_builtin,
            Symbol("let"): let,
            Symbol("eval"): eval_builtin,
            Symbol("defun"): defun,
            Symbol("exit"): exit_builtin,
            Symbol("pop"): pop,
        }
    )
    for name, value in CONSTANTS.items():
        env.define(Symbol(name), value)
