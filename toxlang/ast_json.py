"""JSON serialization/deserialization for the Tox AST.

This module converts between Tox AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. Serialization is written
as a visitor over the node set; deserialization looks node classes up by
name. A serialized program can be loaded back and run without re-parsing.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .ast import (
    Node, Literal, Grouping, Unary, Binary, Logical, Variable, Assign, Call,
    ExpressionStmt, LogStmt, LetStmt, Block, IfStmt, WhileStmt, FunctionStmt,
    ReturnStmt,
)
from .tokens import Token, TokenType


def token_to_obj(token: Token) -> Dict[str, Any]:
    return {
        "type": token.type.name,
        "lexeme": token.lexeme,
        "literal": token.literal,
        "line": token.line,
    }


def token_from_obj(o: Dict[str, Any]) -> Token:
    return Token(TokenType[o["type"]], o["lexeme"], o.get("literal"), o["line"])


class ASTSerializer:
    """Visitor that turns each node into a dict tagged with its class name."""

    def dump(self, node: Any) -> Any:
        if node is None:
            return None
        if isinstance(node, list):
            return [self.dump(n) for n in node]
        return node.accept(self)

    def visit_literal(self, node: Literal) -> Dict[str, Any]:
        return {"type": "Literal", "value": node.value}

    def visit_grouping(self, node: Grouping) -> Dict[str, Any]:
        return {"type": "Grouping", "expression": self.dump(node.expression)}

    def visit_unary(self, node: Unary) -> Dict[str, Any]:
        return {"type": "Unary", "operator": token_to_obj(node.operator), "right": self.dump(node.right)}

    def visit_binary(self, node: Binary) -> Dict[str, Any]:
        return {
            "type": "Binary",
            "left": self.dump(node.left),
            "operator": token_to_obj(node.operator),
            "right": self.dump(node.right),
        }

    def visit_logical(self, node: Logical) -> Dict[str, Any]:
        return {
            "type": "Logical",
            "left": self.dump(node.left),
            "operator": token_to_obj(node.operator),
            "right": self.dump(node.right),
        }

    def visit_variable(self, node: Variable) -> Dict[str, Any]:
        return {"type": "Variable", "name": token_to_obj(node.name)}

    def visit_assign(self, node: Assign) -> Dict[str, Any]:
        return {"type": "Assign", "name": token_to_obj(node.name), "value": self.dump(node.value)}

    def visit_call(self, node: Call) -> Dict[str, Any]:
        return {
            "type": "Call",
            "callee": self.dump(node.callee),
            "paren": token_to_obj(node.paren),
            "arguments": self.dump(node.arguments),
        }

    def visit_expression_stmt(self, node: ExpressionStmt) -> Dict[str, Any]:
        return {"type": "ExpressionStmt", "expression": self.dump(node.expression)}

    def visit_log_stmt(self, node: LogStmt) -> Dict[str, Any]:
        return {"type": "LogStmt", "expression": self.dump(node.expression)}

    def visit_let_stmt(self, node: LetStmt) -> Dict[str, Any]:
        return {"type": "LetStmt", "name": token_to_obj(node.name), "initializer": self.dump(node.initializer)}

    def visit_block(self, node: Block) -> Dict[str, Any]:
        return {"type": "Block", "statements": self.dump(node.statements)}

    def visit_if_stmt(self, node: IfStmt) -> Dict[str, Any]:
        return {
            "type": "IfStmt",
            "condition": self.dump(node.condition),
            "then_branch": self.dump(node.then_branch),
            "else_branch": self.dump(node.else_branch),
        }

    def visit_while_stmt(self, node: WhileStmt) -> Dict[str, Any]:
        return {"type": "WhileStmt", "condition": self.dump(node.condition), "body": self.dump(node.body)}

    def visit_function_stmt(self, node: FunctionStmt) -> Dict[str, Any]:
        return {
            "type": "FunctionStmt",
            "name": token_to_obj(node.name),
            "params": [token_to_obj(p) for p in node.params],
            "body": self.dump(node.body),
        }

    def visit_return_stmt(self, node: ReturnStmt) -> Dict[str, Any]:
        return {"type": "ReturnStmt", "keyword": token_to_obj(node.keyword), "value": self.dump(node.value)}


def ast_to_obj(node: Any) -> Any:
    """Serialize a node, or a list of nodes, to JSON-compatible objects."""
    return ASTSerializer().dump(node)


NODE_TYPES = {
    cls.__name__: cls
    for cls in (
        Literal, Grouping, Unary, Binary, Logical, Variable, Assign, Call,
        ExpressionStmt, LogStmt, LetStmt, Block, IfStmt, WhileStmt,
        FunctionStmt, ReturnStmt,
    )
}

# Fields holding a single token, or a list of tokens, rather than nodes
TOKEN_FIELDS = {'operator', 'name', 'paren', 'keyword'}
TOKEN_LIST_FIELDS = {'params'}


def ast_from_obj(obj: Any) -> Any:
    if obj is None:
        return None
    if isinstance(obj, list):
        return [ast_from_obj(o) for o in obj]
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    cls = NODE_TYPES.get(t)
    if cls is None:
        raise ValueError(f"Unknown AST node type: {t}")
    if cls is Literal:
        return Literal(obj["value"])
    fields: Dict[str, Any] = {}
    for key, value in obj.items():
        if key == "type":
            continue
        if key in TOKEN_FIELDS:
            fields[key] = token_from_obj(value)
        elif key in TOKEN_LIST_FIELDS:
            fields[key] = [token_from_obj(v) for v in value]
        else:
            fields[key] = ast_from_obj(value)
    return cls(**fields)


def program_from_obj(obj: List[Any]) -> List[Node]:
    """Rebuild a program (a list of top-level statements) from JSON objects."""
    if not isinstance(obj, list):
        raise TypeError("AST program must be a list of statements")
    return [ast_from_obj(o) for o in obj]
