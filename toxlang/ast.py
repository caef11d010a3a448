"""Abstract Syntax Tree (AST) definitions for the Tox language.

There are two closed families of nodes: expressions, which produce values,
and statements, which are executed for their effect. Every node offers
`accept(visitor)`, which calls the visitor method named after the node
(`visit_binary`, `visit_if_stmt`, ...). This lets new passes over the tree
be written without touching the node classes; see `ast_json` for one.
The interpreter itself dispatches on node type directly.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, ClassVar, List, Optional

from .tokens import Token


@dataclass
class Node:
    """Base class for all AST nodes."""
    visit_method: ClassVar[str] = 'visit_node'

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.visit_method = 'visit_' + re.sub(r'(?<!^)(?=[A-Z])', '_', cls.__name__).lower()

    def accept(self, visitor: Any) -> Any:
        return getattr(visitor, self.visit_method)(self)


@dataclass
class Expr(Node):
    pass


@dataclass
class Stmt(Node):
    pass


# Expressions

@dataclass
class Literal(Expr):
    value: Any


@dataclass
class Grouping(Expr):
    expression: Expr


@dataclass
class Unary(Expr):
    operator: Token
    right: Expr


@dataclass
class Binary(Expr):
    left: Expr
    operator: Token
    right: Expr


@dataclass
class Logical(Expr):
    left: Expr
    operator: Token  # AND or OR
    right: Expr


@dataclass
class Variable(Expr):
    name: Token


@dataclass
class Assign(Expr):
    name: Token
    value: Expr


@dataclass
class Call(Expr):
    callee: Expr
    paren: Token  # closing parenthesis, used to locate runtime errors
    arguments: List[Expr]


# Statements

@dataclass
class ExpressionStmt(Stmt):
    expression: Expr


@dataclass
class LogStmt(Stmt):
    expression: Expr


@dataclass
class LetStmt(Stmt):
    name: Token
    initializer: Optional[Expr]


@dataclass
class Block(Stmt):
    statements: List[Stmt]


@dataclass
class IfStmt(Stmt):
    condition: Expr
    then_branch: Stmt
    else_branch: Optional[Stmt]


@dataclass
class WhileStmt(Stmt):
    condition: Expr
    body: Stmt


@dataclass
class FunctionStmt(Stmt):
    name: Token
    params: List[Token]
    body: List[Stmt]


@dataclass
class ReturnStmt(Stmt):
    keyword: Token
    value: Optional[Expr]
