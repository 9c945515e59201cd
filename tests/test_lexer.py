import io
import math

import pytest

from wavefront_reader.lexer import Lexer, lex, parse_number, parse_polygon
from wavefront_reader.token import Token, TokenKind


@pytest.mark.parametrize('text,kind', [
    ('mtllib', TokenKind.MTLLIB),
    ('o', TokenKind.OBJECT),
    ('v', TokenKind.VERTEX),
    ('vn', TokenKind.NORMAL),
    ('vt', TokenKind.TEXCOORD),
    ('usemtl', TokenKind.USEMTL),
    ('f', TokenKind.FACE),
    ('s', TokenKind.ILLUM),
])
def test_lexes_keywords(text, kind):
    assert lex(text) == [Token(kind, None, 1, 1)]


def test_lexes_comment():
    assert lex('# This is a comment') == [Token(TokenKind.COMMENT, '# This is a comment', 1, 1)]


def test_lexes_number():
    assert lex('1.0') == [Token(TokenKind.NUMBER, 1.0, 1, 1)]


@pytest.mark.parametrize('text,payload', [
    ('1/2/3', (1, 2, 3)),
    ('1//2', (1, 0, 2)),
    ('1/2/', (1, 2, 0)),
    ('1/2', (1, 2, 0)),
])
def test_lexes_polygon(text, payload):
    assert lex(text) == [Token(TokenKind.POLYGON, payload, 1, 1)]


def test_lexes_string():
    assert lex('asdf') == [Token(TokenKind.STRING, 'asdf', 1, 1)]


@pytest.mark.parametrize('text', [' ', ' \t '])
def test_lexes_separator(text):
    assert lex(text) == [Token(TokenKind.SEPARATOR, None, 1, 1)]


@pytest.mark.parametrize('text', ['\n', '\r', '\n\r'])
def test_lexes_single_line_break(text):
    assert lex(text) == [Token(TokenKind.LINEBREAK, text, 1, 1)]


def test_lexes_multiple_line_endings():
    tokens = lex('\r\n\r\n\n\r\n\n\r\r')
    assert tokens == [
        Token(TokenKind.LINEBREAK, '\r', 1, 1),
        Token(TokenKind.LINEBREAK, '\n\r', 2, 1),
        Token(TokenKind.LINEBREAK, '\n', 3, 1),
        Token(TokenKind.LINEBREAK, '\n\r', 4, 1),
        Token(TokenKind.LINEBREAK, '\n', 5, 1),
        Token(TokenKind.LINEBREAK, '\n\r', 6, 1),
        Token(TokenKind.LINEBREAK, '\r', 7, 1),
    ]


def test_carriage_returns_are_separate_line_breaks():
    assert [token.payload for token in lex('\r\r')] == ['\r', '\r']


def test_lexes_multiple_tokens_from_the_same_line():
    assert lex('v 0.00 1.00 2.00\n') == [
        Token(TokenKind.VERTEX, None, 1, 1),
        Token(TokenKind.SEPARATOR, None, 1, 2),
        Token(TokenKind.NUMBER, 0.0, 1, 3),
        Token(TokenKind.SEPARATOR, None, 1, 7),
        Token(TokenKind.NUMBER, 1.0, 1, 8),
        Token(TokenKind.SEPARATOR, None, 1, 12),
        Token(TokenKind.NUMBER, 2.0, 1, 13),
        Token(TokenKind.LINEBREAK, '\n', 1, 17),
    ]


def test_lexes_multiple_tokens_from_multiple_lines():
    text = '# First line comment\nv 0.00 1.00 2.00\nusemtl some-material\n\ns 1\n'
    assert lex(text) == [
        Token(TokenKind.COMMENT, '# First line comment', 1, 1),
        Token(TokenKind.LINEBREAK, '\n', 1, 21),

        Token(TokenKind.VERTEX, None, 2, 1),
        Token(TokenKind.SEPARATOR, None, 2, 2),
        Token(TokenKind.NUMBER, 0.0, 2, 3),
        Token(TokenKind.SEPARATOR, None, 2, 7),
        Token(TokenKind.NUMBER, 1.0, 2, 8),
        Token(TokenKind.SEPARATOR, None, 2, 12),
        Token(TokenKind.NUMBER, 2.0, 2, 13),
        Token(TokenKind.LINEBREAK, '\n', 2, 17),

        Token(TokenKind.USEMTL, None, 3, 1),
        Token(TokenKind.SEPARATOR, None, 3, 7),
        Token(TokenKind.STRING, 'some-material', 3, 8),
        Token(TokenKind.LINEBREAK, '\n', 3, 21),

        Token(TokenKind.LINEBREAK, '\n', 4, 1),

        Token(TokenKind.ILLUM, None, 5, 1),
        Token(TokenKind.SEPARATOR, None, 5, 2),
        Token(TokenKind.NUMBER, 1.0, 5, 3),
        Token(TokenKind.LINEBREAK, '\n', 5, 4),
    ]


def test_comment_runs_to_end_of_line():
    tokens = lex('v 1 # trailing  words\n')
    assert tokens[-2] == Token(TokenKind.COMMENT, '# trailing  words', 1, 5)
    assert tokens[-1].kind is TokenKind.LINEBREAK


def test_hash_inside_token_starts_comment():
    tokens = lex('abc#def')
    assert tokens == [
        Token(TokenKind.STRING, 'abc', 1, 1),
        Token(TokenKind.COMMENT, '#def', 1, 4),
    ]


@pytest.mark.parametrize('text', ['nan', 'NaN', '-nan', '+nan'])
def test_nan_is_not_a_number(text):
    tokens = lex(text)
    assert len(tokens) == 1
    assert tokens[0].kind is TokenKind.STRING
    assert tokens[0].payload == text


def test_parse_number():
    assert parse_number('-1.5e2') == -150.0
    assert math.isinf(parse_number('inf'))
    assert parse_number('1_000') is None
    assert parse_number('nan') is None
    assert parse_number('abc') is None


def test_parse_polygon_rejects_malformed_references():
    assert parse_polygon('1/2/3/4') is None
    assert parse_polygon('1/a/3') is None
    assert parse_polygon('-1/2/3') is None
    assert parse_polygon('12') is None


def test_reads_stream_one_character_at_a_time():
    tokens = Lexer().lex(io.StringIO('o cube\n', newline=''))
    assert [token.kind for token in tokens] == [
        TokenKind.OBJECT, TokenKind.SEPARATOR, TokenKind.STRING, TokenKind.LINEBREAK
    ]


def test_empty_input_has_no_tokens():
    assert lex('') == []
