"""Callable values for Stack NT.

A function value is either a builtin, which is a plain Python callable taking
the interpreter session, or a UserDefined wrapping a block body.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from stacknt import Program

if TYPE_CHECKING:
    from stacknt.interpreter import Interpreter

# Native operation: full access to the session's stack and environment
Builtin = Callable[["Interpreter"], None]


class UserDefined:
    """A named block. Invoking it evaluates the body in the caller's frame."""

    __slots__ = ("body",)
    __match_args__ = ("body",)

    def __init__(self, body: Program):
        self.body: Program = body

    def __eq__(self, other) -> bool:
        return isinstance(other, UserDefined) and self.body == other.body

    def __repr__(self) -> str:
        return f"UserDefined({self.body!r})"
