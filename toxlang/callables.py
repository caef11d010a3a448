"""Callable values: user-defined functions and host-provided natives."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, List

from .ast import FunctionStmt
from .environment import Environment

if TYPE_CHECKING:
    from .interpreter import Interpreter


class ToxCallable:
    """Anything a Tox program can call."""

    def arity(self) -> int:
        raise NotImplementedError

    def call(self, interpreter: 'Interpreter', arguments: List[Any]) -> Any:
        raise NotImplementedError


@dataclass(eq=False)
class UserFunction(ToxCallable):
    declaration: FunctionStmt
    closure: Environment  # scope active where the function was declared

    def arity(self) -> int:
        return len(self.declaration.params)

    def call(self, interpreter: 'Interpreter', arguments: List[Any]) -> Any:
        # Parent is the closure, not the caller's scope: lexical scoping.
        env = Environment(parent=self.closure)
        for param, argument in zip(self.declaration.params, arguments):
            env.define(param.lexeme, argument)
        result = interpreter.execute_block(self.declaration.body, env)
        if result is not None:
            return result.value
        return None

    def __str__(self) -> str:
        return f"<fn {self.declaration.name.lexeme}>"


@dataclass(eq=False)
class NativeFunction(ToxCallable):
    name: str
    fixed_arity: int
    fn: Callable[[List[Any]], Any]

    def arity(self) -> int:
        return self.fixed_arity

    def call(self, interpreter: 'Interpreter', arguments: List[Any]) -> Any:
        return self.fn(arguments)

    def __str__(self) -> str:
        return '<native fn>'

    def __repr__(self) -> str:
        return f"<native {self.name}>"
