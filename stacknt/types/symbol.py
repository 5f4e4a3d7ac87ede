"""Symbols: bare words in Stack NT source.

A symbol names an environment binding when it is looked up, and is plain data
when it is unbound (e.g. the name operand of `let`). Names are interned since
every evaluated word is a dict lookup.
"""

from __future__ import annotations

import sys


class Symbol:
    __slots__ = ("name",)
    __match_args__ = ("name",)

    def __init__(self, name: str):
        self.name = sys.intern(name)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.name is other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Symbol({self.name!r})"

    def __str__(self) -> str:
        return self.name
