"""Tree-walking interpreter for the Tox language.

The interpreter executes statements and evaluates expressions straight off
the AST. The scope to run in is passed explicitly to `execute` and
`evaluate`, so entering a block or a function call never has to restore
anything on the way out, whether the block finishes, returns or fails.

A `return` statement does not raise. `execute` hands back a
`ReturnSignal`, every enclosing statement passes it up unchanged, and the
function call that started the body turns it into the call's result.
Runtime errors are raised as `ToxRuntimeError` and stop the current
`interpret` call after being reported.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, List, Optional, TextIO

from .ast import (
    Expr, Stmt, Literal, Grouping, Unary, Binary, Logical, Variable, Assign,
    Call, ExpressionStmt, LogStmt, LetStmt, Block, IfStmt, WhileStmt,
    FunctionStmt, ReturnStmt,
)
from .callables import ToxCallable, UserFunction
from .diagnostics import ErrorReporter
from .environment import Environment
from .errors import ReturnSignal, ToxRuntimeError
from .lexer import scan
from .parser import parse
from .std import populate_global_environment
from .tokens import Token, TokenType
from .types import divide, is_equal, is_number, is_truthy, to_string, type_name

# Each Tox call costs about six Python frames.
RECURSION_LIMIT = 10000
if sys.getrecursionlimit() < RECURSION_LIMIT:
    sys.setrecursionlimit(RECURSION_LIMIT)


def parse_program(source: str, reporter: Optional[ErrorReporter] = None) -> List[Stmt]:
    """Scan and parse source code into a list of top-level statements."""
    if reporter is None:
        reporter = ErrorReporter()
    return parse(scan(source, reporter), reporter)


class Interpreter:
    """Core interpreter that executes Tox statements."""
    def __init__(
        self,
        reporter: Optional[ErrorReporter] = None,
        output: Callable[[str], Any] = print,
        debug_level: int = 0,
        debug_file: str = 'debug.txt',
    ):
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.output = output
        self.globals = populate_global_environment(Environment())
        self.debug_level = debug_level
        self.debug_fp: Optional[TextIO] = open(debug_file, 'w') if debug_level > 0 else None

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    def close(self) -> None:
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    # Public API
    def interpret(self, statements: List[Stmt]) -> None:
        """Run a program against the global scope.

        A runtime error is reported and ends this call; statements after the
        failing one do not run.
        """
        self.debug(f"interpret {len(statements)} statements")
        try:
            for stmt in statements:
                if isinstance(self.execute(stmt, self.globals), ReturnSignal):
                    self.debug("return at top level")
                    break
        except ToxRuntimeError as error:
            self.debug(f"runtime error at line {error.token.line}: {error.message}")
            self.reporter.runtime_error(error)

    def execute_block(self, statements: List[Stmt], env: Environment) -> Optional[ReturnSignal]:
        for stmt in statements:
            result = self.execute(stmt, env)
            # propagate return signals
            if result is not None:
                return result
        return None

    def execute(self, node: Stmt, env: Environment) -> Optional[ReturnSignal]:
        if isinstance(node, ExpressionStmt):
            self.evaluate(node.expression, env)
            return None
        if isinstance(node, LogStmt):
            value = self.evaluate(node.expression, env)
            self.output(to_string(value))
            return None
        if isinstance(node, LetStmt):
            value = self.evaluate(node.initializer, env) if node.initializer is not None else None
            env.define(node.name.lexeme, value)
            if self.debug_level >= 2:
                self.debug(f"let {node.name.lexeme}: {type_name(value)} = {to_string(value)}")
            return None
        if isinstance(node, Block):
            return self.execute_block(node.statements, Environment(parent=env))
        if isinstance(node, IfStmt):
            cond = self.evaluate(node.condition, env)
            truthy = is_truthy(cond)
            if self.debug_level >= 3:
                self.debug(f"if condition {to_string(cond)} -> {truthy}")
            if truthy:
                return self.execute(node.then_branch, env)
            if node.else_branch is not None:
                return self.execute(node.else_branch, env)
            return None
        if isinstance(node, WhileStmt):
            while is_truthy(self.evaluate(node.condition, env)):
                result = self.execute(node.body, env)
                if result is not None:
                    return result
            return None
        if isinstance(node, FunctionStmt):
            env.define(node.name.lexeme, UserFunction(node, env))
            if self.debug_level >= 2:
                self.debug(f"define function {node.name.lexeme}/{len(node.params)}")
            return None
        if isinstance(node, ReturnStmt):
            value = self.evaluate(node.value, env) if node.value is not None else None
            return ReturnSignal(value)
        raise NotImplementedError(f"execute: unexpected node type {type(node)}")

    def evaluate(self, node: Expr, env: Environment) -> Any:
        if isinstance(node, Literal):
            return node.value
        if isinstance(node, Grouping):
            return self.evaluate(node.expression, env)
        if isinstance(node, Variable):
            return env.get(node.name)
        if isinstance(node, Assign):
            value = self.evaluate(node.value, env)
            env.assign(node.name, value)
            return value
        if isinstance(node, Unary):
            right = self.evaluate(node.right, env)
            if node.operator.type == TokenType.MINUS:
                check_number_operand(node.operator, right)
                return -right
            return not is_truthy(right)
        if isinstance(node, Logical):
            left = self.evaluate(node.left, env)
            if node.operator.type == TokenType.OR:
                if is_truthy(left):
                    return left
            elif not is_truthy(left):
                return left
            return self.evaluate(node.right, env)
        if isinstance(node, Binary):
            left = self.evaluate(node.left, env)
            right = self.evaluate(node.right, env)
            return apply_binary_op(node.operator, left, right)
        if isinstance(node, Call):
            callee = self.evaluate(node.callee, env)
            arguments = [self.evaluate(arg, env) for arg in node.arguments]
            return self.call_function(callee, arguments, node.paren)
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def call_function(self, callee: Any, arguments: List[Any], paren: Token) -> Any:
        if not isinstance(callee, ToxCallable):
            raise ToxRuntimeError(paren, "Can only call functions.")
        if len(arguments) != callee.arity():
            raise ToxRuntimeError(paren, f"Expected {callee.arity()} arguments but got {len(arguments)}.")
        if self.debug_level >= 3:
            self.debug(f"call {callee} with {len(arguments)} arguments (line {paren.line})")
        try:
            return callee.call(self, arguments)
        except RecursionError:
            raise ToxRuntimeError(paren, "Stack overflow.") from None


def check_number_operand(operator: Token, operand: Any) -> None:
    if not is_number(operand):
        raise ToxRuntimeError(operator, "Operand must be a number.")


def check_number_operands(operator: Token, left: Any, right: Any) -> None:
    if not (is_number(left) and is_number(right)):
        raise ToxRuntimeError(operator, "Operands must be numbers.")


def apply_binary_op(operator: Token, left: Any, right: Any) -> Any:
    op = operator.type
    if op == TokenType.PLUS:
        if is_number(left) and is_number(right):
            return left + right
        if isinstance(left, str) and isinstance(right, str):
            return left + right
        raise ToxRuntimeError(operator, "Operands must be two numbers or two strings.")
    if op == TokenType.BANG_EQUAL:
        return not is_equal(left, right)
    if op == TokenType.EQUAL_EQUAL:
        return is_equal(left, right)
    check_number_operands(operator, left, right)
    if op == TokenType.MINUS:
        return left - right
    if op == TokenType.STAR:
        return left * right
    if op == TokenType.SLASH:
        return divide(left, right)
    if op == TokenType.GREATER:
        return left > right
    if op == TokenType.GREATER_EQUAL:
        return left >= right
    if op == TokenType.LESS:
        return left < right
    if op == TokenType.LESS_EQUAL:
        return left <= right
    raise ToxRuntimeError(operator, f"Unknown operator '{operator.lexeme}'.")


def run_program(source: str, debug_level: int = 0) -> Interpreter:
    """Convenience function to scan, parse and run a Tox program from a source string.

    Nothing is executed when the source has lexical or syntax errors.
    """
    reporter = ErrorReporter()
    statements = parse_program(source, reporter)
    interpreter = Interpreter(reporter=reporter, debug_level=debug_level)
    try:
        if not reporter.had_error:
            interpreter.interpret(statements)
    finally:
        interpreter.close()
    return interpreter
