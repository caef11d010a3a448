"""Lexer for the Tox language.

The token set is declared as a Lark terminal grammar and Lark runs it in
lexer-only mode. Lark picks the longest matching terminal at each position,
keeps track of line numbers and drops whitespace and comments.

Malformed input is described by terminals of its own (an unterminated
string, an unterminated block comment, and any single character nothing
else accepts). The Lark lexer therefore never stops early; `scan` turns
those tokens into diagnostics and carries on with the rest of the source.
"""

from __future__ import annotations

from typing import List

from lark import Lark

from .diagnostics import ErrorReporter
from .tokens import KEYWORDS, Token, TokenType


TOX_TERMINALS = r"""
    BANG_EQUAL: "!="
    EQUAL_EQUAL: "=="
    GREATER_EQUAL: ">="
    LESS_EQUAL: "<="

    LEFT_PAREN: "("
    RIGHT_PAREN: ")"
    LEFT_BRACE: "{"
    RIGHT_BRACE: "}"
    COMMA: ","
    DOT: "."
    MINUS: "-"
    PLUS: "+"
    SEMICOLON: ";"
    SLASH: "/"
    STAR: "*"
    BANG: "!"
    EQUAL: "="
    GREATER: ">"
    LESS: "<"

    NUMBER: /[0-9]+(?:\.[0-9]+)?/
    IDENTIFIER: /[A-Za-z_][A-Za-z0-9_]*/
    STRING: /"[^"]*"/
    UNTERMINATED_STRING: /"[^"]*\Z/

    // Comments
    LINE_COMMENT: /\/\/[^\n]*/
    BLOCK_COMMENT: /\/\*[\s\S]*?\*\//
    UNTERMINATED_COMMENT: /\/\*(?:(?!\*\/)[\s\S])*\Z/

    // Anything that cannot start one of the terminals above
    UNEXPECTED_CHARACTER: /[^\sA-Za-z0-9_"(){},.;+\-*\/!=<>]/

    WHITESPACE: /\s+/
    %ignore WHITESPACE
    %ignore LINE_COMMENT
    %ignore BLOCK_COMMENT
"""


TOX_LEXER = Lark(TOX_TERMINALS, parser=None, lexer='basic')


LEXICAL_ERRORS = {
    'UNEXPECTED_CHARACTER': 'Unexpected character.',
    'UNTERMINATED_STRING': 'Unterminated string.',
    'UNTERMINATED_COMMENT': 'Unterminated block comment.',
}


def scan(source: str, reporter: ErrorReporter) -> List[Token]:
    """Convert source code into a list of tokens ending with EOF.

    Lexical errors are reported to `reporter` and the offending text is
    skipped, so the returned list is always usable by the parser.
    """
    tokens: List[Token] = []
    for raw in TOX_LEXER.lex(source):
        if raw.type in LEXICAL_ERRORS:
            reporter.error(raw.end_line, LEXICAL_ERRORS[raw.type])
            continue
        lexeme = str(raw)
        if raw.type == 'IDENTIFIER':
            tokens.append(Token(KEYWORDS.get(lexeme, TokenType.IDENTIFIER), lexeme, None, raw.end_line))
        elif raw.type == 'NUMBER':
            tokens.append(Token(TokenType.NUMBER, lexeme, float(lexeme), raw.end_line))
        elif raw.type == 'STRING':
            tokens.append(Token(TokenType.STRING, lexeme, lexeme[1:-1], raw.end_line))
        else:
            tokens.append(Token(TokenType[raw.type], lexeme, None, raw.end_line))
    tokens.append(Token(TokenType.EOF, '', None, source.count('\n') + 1))
    return tokens
