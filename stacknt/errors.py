

class StackNTError(Exception):
    """ Base class for all Stack NT errors"""
    pass

class StackNTInvalidSymbol(StackNTError):
    """ Raised when something other than a Symbol is used as a binding name"""
    pass

class StackNTRecursionError(StackNTError):
    """ Raised when evaluation nests deeper than the session allows"""

    def __init__(self, limit: int):
        super().__init__(f"recursion depth exceeded (limit {limit})")
        self.limit = limit
