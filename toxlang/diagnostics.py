"""Default diagnostics sink for the Tox pipeline.

The lexer, parser and interpreter never print errors themselves. They hand
them to a reporter object, which decides where the text goes. The
`ErrorReporter` below writes to a stream (stderr by default) and keeps a
record of everything it was told, which the CLI uses to pick an exit status
and the tests use to inspect messages.
"""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from .errors import ToxRuntimeError
from .tokens import Token, TokenType


class ErrorReporter:
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.messages: List[str] = []
        self.had_error = False
        self.had_runtime_error = False

    def error(self, line: int, message: str) -> None:
        """Report a lexical error that has no token attached."""
        self.report(line, '', message)

    def token_error(self, token: Token, message: str) -> None:
        """Report a syntax error located at `token`."""
        if token.type == TokenType.EOF:
            self.report(token.line, ' at end', message)
        else:
            self.report(token.line, f" at '{token.lexeme}'", message)

    def report(self, line: int, where: str, message: str) -> None:
        self.emit(f"[line {line}] Error{where}: {message}")
        self.had_error = True

    def runtime_error(self, error: ToxRuntimeError) -> None:
        self.emit(f"{error.message}\n[line {error.token.line}]")
        self.had_runtime_error = True

    def emit(self, text: str) -> None:
        self.messages.append(text)
        print(text, file=self.stream if self.stream is not None else sys.stderr)

    def reset(self) -> None:
        self.messages.clear()
        self.had_error = False
        self.had_runtime_error = False
