from __future__ import annotations


class NullType:
    """Absence/underflow sentinel. Popping an empty stack yields Null."""

    def __repr__(self): return "Null"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NullType)

    def __hash__(self):
        return hash(NullType)


Null = NullType()
