# Tox language package
# This package provides a lexer, parser and tree-walking interpreter for the Tox language.
from .diagnostics import ErrorReporter
from .errors import ToxError, ToxRuntimeError
from .interpreter import Interpreter, parse_program, run_program
from .lexer import scan
from .parser import parse

__all__ = [
    'ErrorReporter',
    'Interpreter',
    'ToxError',
    'ToxRuntimeError',
    'parse',
    'parse_program',
    'run_program',
    'scan',
]
