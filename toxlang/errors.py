from typing import Any

from toxlang.tokens import Token


class ToxError(Exception):
    """Base class for errors raised by the Tox toolchain."""


class ParseError(ToxError):
    """Raised inside the parser to unwind to the nearest statement boundary."""


class ToxRuntimeError(ToxError):
    """Exception type used to propagate Tox runtime errors."""
    def __init__(self, token: Token, message: str):
        super().__init__(message)
        self.token = token
        self.message = message


class ReturnSignal:
    """Result of executing a `return` statement.

    Statement execution hands this back to its caller instead of raising it,
    so it can never be mistaken for an error. Each enclosing statement passes
    it upward until a function call consumes it.
    """
    __slots__ = ('value',)

    def __init__(self, value: Any):
        self.value = value

    def __repr__(self) -> str:
        return f"ReturnSignal({self.value!r})"
