from stacknt.types.symbol import Symbol
from stacknt.types.nil import Null, NullType
from stacknt.types.function import Builtin, UserDefined
from stacknt.types.environment import Environment

__all__ = ["Symbol", "Null", "NullType", "Builtin", "UserDefined", "Environment"]
