import io

from toxlang.diagnostics import ErrorReporter
from toxlang.lexer import scan
from toxlang.tokens import Token, TokenType


def kinds(tokens):
    return [t.type for t in tokens]


def quiet_reporter():
    return ErrorReporter(stream=io.StringIO())


def test_operators_prefer_longest_match():
    tokens = scan('! != = == < <= > >=', quiet_reporter())
    assert kinds(tokens) == [
        TokenType.BANG, TokenType.BANG_EQUAL, TokenType.EQUAL, TokenType.EQUAL_EQUAL,
        TokenType.LESS, TokenType.LESS_EQUAL, TokenType.GREATER, TokenType.GREATER_EQUAL,
        TokenType.EOF,
    ]


def test_punctuation():
    reporter = quiet_reporter()
    # '/*' would open a block comment
    tokens = scan('(){},.-+;/ *', reporter)
    assert kinds(tokens)[:-1] == [
        TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN, TokenType.LEFT_BRACE, TokenType.RIGHT_BRACE,
        TokenType.COMMA, TokenType.DOT, TokenType.MINUS, TokenType.PLUS, TokenType.SEMICOLON,
        TokenType.SLASH, TokenType.STAR,
    ]
    assert not reporter.had_error


def test_keywords_and_identifiers():
    source = 'and or else false for fn nil log return this true while let if do _name x1 lets'
    tokens = scan(source, quiet_reporter())
    assert kinds(tokens) == [
        TokenType.AND, TokenType.OR, TokenType.ELSE, TokenType.FALSE, TokenType.FOR,
        TokenType.FN, TokenType.NIL, TokenType.LOG, TokenType.RETURN, TokenType.THIS,
        TokenType.TRUE, TokenType.WHILE, TokenType.LET, TokenType.IF, TokenType.DO,
        TokenType.IDENTIFIER, TokenType.IDENTIFIER, TokenType.IDENTIFIER, TokenType.EOF,
    ]
    assert tokens[-2].lexeme == 'lets'


def test_number_literals_decode_to_float():
    tokens = scan('12 3.25 7.', quiet_reporter())
    assert tokens[0] == Token(TokenType.NUMBER, '12', 12.0, 1)
    assert tokens[1].literal == 3.25
    # a trailing dot is not part of the number
    assert kinds(tokens) == [TokenType.NUMBER, TokenType.NUMBER, TokenType.NUMBER, TokenType.DOT, TokenType.EOF]


def test_string_literal_strips_quotes_and_spans_lines():
    tokens = scan('"hello"\n"two\nlines"', quiet_reporter())
    assert tokens[0].literal == 'hello'
    assert tokens[0].lexeme == '"hello"'
    assert tokens[1].literal == 'two\nlines'
    assert tokens[1].line == 3
    assert tokens[2].type == TokenType.EOF


def test_comments_and_whitespace_are_skipped():
    source = 'let a = 1; // trailing comment\n/* block\ncomment */ log a;'
    reporter = quiet_reporter()
    tokens = scan(source, reporter)
    assert [t.lexeme for t in tokens] == ['let', 'a', '=', '1', ';', 'log', 'a', ';', '']
    assert tokens[5].line == 3
    assert not reporter.had_error


def test_line_numbers_and_eof():
    tokens = scan('a\n\nb\n', quiet_reporter())
    assert [t.line for t in tokens] == [1, 3, 4]
    assert tokens[-1] == Token(TokenType.EOF, '', None, 4)


def test_unexpected_character_is_reported_and_skipped():
    reporter = quiet_reporter()
    tokens = scan('let a = 1 @ 2;\nlog #;', reporter)
    assert [t.lexeme for t in tokens] == ['let', 'a', '=', '1', '2', ';', 'log', ';', '']
    assert reporter.messages == [
        '[line 1] Error: Unexpected character.',
        '[line 2] Error: Unexpected character.',
    ]
    assert reporter.had_error


def test_unterminated_string():
    reporter = quiet_reporter()
    tokens = scan('log "abc\ndef', reporter)
    assert kinds(tokens) == [TokenType.LOG, TokenType.EOF]
    assert reporter.messages == ['[line 2] Error: Unterminated string.']


def test_unterminated_block_comment():
    reporter = quiet_reporter()
    tokens = scan('log 1;\n/* never\nclosed', reporter)
    assert kinds(tokens) == [TokenType.LOG, TokenType.NUMBER, TokenType.SEMICOLON, TokenType.EOF]
    assert reporter.messages == ['[line 3] Error: Unterminated block comment.']


def test_empty_source():
    tokens = scan('', quiet_reporter())
    assert tokens == [Token(TokenType.EOF, '', None, 1)]
