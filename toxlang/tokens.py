"""Token definitions for the Tox language.

A token is the smallest unit the parser works with. Tokens are produced
once by the lexer and never modified afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union


class TokenType(Enum):
    # Single-character punctuation
    LEFT_PAREN = 'LEFT_PAREN'
    RIGHT_PAREN = 'RIGHT_PAREN'
    LEFT_BRACE = 'LEFT_BRACE'
    RIGHT_BRACE = 'RIGHT_BRACE'
    COMMA = 'COMMA'
    DOT = 'DOT'
    MINUS = 'MINUS'
    PLUS = 'PLUS'
    SEMICOLON = 'SEMICOLON'
    SLASH = 'SLASH'
    STAR = 'STAR'

    # One or two character operators
    BANG = 'BANG'
    BANG_EQUAL = 'BANG_EQUAL'
    EQUAL = 'EQUAL'
    EQUAL_EQUAL = 'EQUAL_EQUAL'
    GREATER = 'GREATER'
    GREATER_EQUAL = 'GREATER_EQUAL'
    LESS = 'LESS'
    LESS_EQUAL = 'LESS_EQUAL'

    # Literals
    IDENTIFIER = 'IDENTIFIER'
    STRING = 'STRING'
    NUMBER = 'NUMBER'

    # Keywords
    AND = 'AND'
    DO = 'DO'
    ELSE = 'ELSE'
    FALSE = 'FALSE'
    FN = 'FN'
    FOR = 'FOR'
    IF = 'IF'
    LET = 'LET'
    LOG = 'LOG'
    NIL = 'NIL'
    OR = 'OR'
    RETURN = 'RETURN'
    THIS = 'THIS'
    TRUE = 'TRUE'
    WHILE = 'WHILE'

    EOF = 'EOF'


KEYWORDS: Dict[str, TokenType] = {
    'and': TokenType.AND,
    'or': TokenType.OR,
    'else': TokenType.ELSE,
    'false': TokenType.FALSE,
    'for': TokenType.FOR,
    'fn': TokenType.FN,
    'nil': TokenType.NIL,
    'log': TokenType.LOG,
    'return': TokenType.RETURN,
    'this': TokenType.THIS,
    'true': TokenType.TRUE,
    'while': TokenType.WHILE,
    'let': TokenType.LET,
    'if': TokenType.IF,
    'do': TokenType.DO,
}


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    literal: Optional[Union[str, float]]
    line: int

    def __str__(self) -> str:
        literal = '' if self.literal is None else self.literal
        return f"{self.type.name} {self.lexeme} {literal}"
