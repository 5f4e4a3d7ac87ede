from __future__ import annotations

import logging
import sys

from stacknt import Value, Program
from stacknt.builtin.env_builtin import register
from stacknt.config import get_max_depth
from stacknt.errors import StackNTRecursionError
from stacknt.evaluation.evaluator import evaluate
from stacknt.reader.parser import parse
from stacknt.types.environment import Environment
from stacknt.types.nil import Null

log = logging.getLogger(__name__)

# Python frames per evaluation frame (evaluate -> builtin -> evaluate) plus headroom
_FRAMES_PER_LEVEL = 3
_FRAME_HEADROOM = 200


class Interpreter:
    """
    One Stack NT session: a data stack, a flat environment preloaded with the
    builtins, and the return counter. State persists across calls to eval/run.
    """

    def __init__(self, max_depth: int | None = None):
        self.stack: list[Value] = []
        self.env: Environment = Environment()
        register(self.env)

        # Frames still to unwind after `return`
        self.returns: int = 0
        # Evaluation frames currently active
        self.depth: int = 0
        self.max_depth: int = max_depth if max_depth is not None else get_max_depth()

        needed = self.max_depth * _FRAMES_PER_LEVEL + _FRAME_HEADROOM
        if sys.getrecursionlimit() < needed:
            log.debug("Raising Python recursion limit to %d", needed)
            sys.setrecursionlimit(needed)

    def push(self, value: Value) -> None:
        self.stack.append(value)

    def pop(self) -> Value:
        """Pop the topmost value; an empty stack yields Null."""
        if self.stack:
            return self.stack.pop()
        return Null

    def run(self, program: Program) -> None:
        """Evaluate an already parsed program against this session."""
        try:
            evaluate(self, program)
        except StackNTRecursionError:
            # Leave the session usable; the stack keeps whatever was pushed
            self.returns = 0
            self.depth = 0
            raise

    def eval(self, code: str) -> list[Value]:
        """Parse and evaluate `code`, returning the session stack."""
        self.run(parse(code))
        return self.stack
