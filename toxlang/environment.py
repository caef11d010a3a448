from typing import Any, Dict, Optional

from toxlang.errors import ToxRuntimeError
from toxlang.tokens import Token


class Environment:
    """A scope mapping names to values, linked to its enclosing scope.

    Scopes are shared by reference: a function value keeps the scope it was
    declared in alive for as long as the function itself is reachable.
    """
    def __init__(self, parent: Optional['Environment'] = None):
        self.parent = parent
        self.values: Dict[str, Any] = {}

    def define(self, name: str, value: Any) -> None:
        # Redefinition in the same scope is allowed and overwrites.
        self.values[name] = value

    def get(self, name: Token) -> Any:
        env: Optional[Environment] = self
        while env is not None:
            if name.lexeme in env.values:
                return env.values[name.lexeme]
            env = env.parent
        raise ToxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

    def assign(self, name: Token, value: Any) -> None:
        env: Optional[Environment] = self
        while env is not None:
            if name.lexeme in env.values:
                env.values[name.lexeme] = value
                return
            env = env.parent
        raise ToxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")
