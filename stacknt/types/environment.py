"""Runtime environment for Stack NT.

The Environment is a single flat mapping of Symbols to values owned by one
interpreter session. There are no nested scopes: `let` and `defun` overwrite
any existing binding of the same name, and the binding lives for the rest of
the session.
"""

from __future__ import annotations

import logging

from stacknt import Value
from stacknt.errors import StackNTInvalidSymbol
from stacknt.types.symbol import Symbol

log = logging.getLogger(__name__)


class Environment:
    """Flat mapping from Symbols to Stack NT values."""

    __slots__ = ("vars",)

    def __init__(self):
        self.vars: dict[Symbol, Value] = {}

    def define(self, name: Symbol, value: Value) -> None:
        """Bind `name` to `value`, replacing any previous binding.

        Raises StackNTInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise StackNTInvalidSymbol(f"Cannot define {name!r} as a symbol")
        if name in self.vars:
            log.debug("Rebinding %s", name)
        self.vars[name] = value

    def get(self, name: Symbol, default: Value = None) -> Value:
        """Return the value bound to `name`, or `default` when unbound."""
        return self.vars.get(name, default)

    def update(self, mapping: dict[Symbol, Value]) -> None:
        """Bulk-define a mapping of Symbol -> value."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: Symbol) -> bool:
        return name in self.vars

    def __repr__(self) -> str:
        return f"<Environment {len(self.vars)} bindings>"
