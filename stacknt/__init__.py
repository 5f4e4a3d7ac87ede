# Core type aliases for the Stack NT data model.
# Runtime values are plain Python types (float, str, bool, list for blocks)
# plus Symbol, UserDefined, builtin callables and the Null sentinel.
#
# Naming guidance:
# - Value:   any datum that can sit on the stack or be bound in the environment.
# - Program: an ordered sequence of Values produced by the parser.

import logging
from typing import Any

__version__ = "0.1.0"

# Runtime value alias
Value = Any
# A parsed program (and a block body) is a plain list of values
Program = list

logging.getLogger(__name__).addHandler(logging.NullHandler())
