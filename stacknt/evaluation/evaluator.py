"""Core evaluator for the Stack NT interpreter.

Runs a program against the session's single stack and flat environment.
Blocks and user-defined functions are evaluated by recursive calls that share
that same state, so every call is one frame of Python recursion.

Non-local exit uses the session's return counter: after each item, a nonzero
counter is decremented and the current frame stops. Enclosing frames see the
remaining count after the nested call returns and unwind in turn.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stacknt import Program
from stacknt.errors import StackNTRecursionError
from stacknt.types.function import UserDefined
from stacknt.types.symbol import Symbol

if TYPE_CHECKING:
    from stacknt.interpreter import Interpreter

log = logging.getLogger(__name__)


def evaluate(interp: Interpreter, program: Program) -> None:
    """Evaluate `program` as one frame against the session state."""
    if interp.depth >= interp.max_depth:
        log.debug("Frame limit %d reached", interp.max_depth)
        raise StackNTRecursionError(interp.max_depth)

    interp.depth += 1
    try:
        for item in program:
            match item:
                case Symbol():
                    # Unbound symbols are literal data
                    match interp.env.get(item, item):
                        case UserDefined(body):
                            evaluate(interp, body)
                        case list() as block:
                            interp.push(list(block))
                        case value if callable(value):
                            value(interp)
                        case value:
                            interp.push(value)
                case _:
                    interp.push(item)

            if interp.returns:
                interp.returns -= 1
                return
    finally:
        interp.depth -= 1
