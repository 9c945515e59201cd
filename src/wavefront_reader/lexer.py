import io
import logging
import math
import re
from enum import Enum

from .token import Token, TokenKind, keywords

logger = logging.getLogger(__name__)

line_endings = ('\n', '\r')

polygon_pattern = re.compile(r'([0-9]*)/([0-9]*)(?:/([0-9]*))?', re.ASCII)


class LexerState(Enum):
    INITIAL = 0
    TOKEN = 1
    LINEBREAK = 2
    SEPARATOR = 3
    COMMENT = 4


def parse_number(text: str):
    """Float value of the text, or None when it is not a number or is NaN."""
    if '_' in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isnan(value):
        return None
    return value


def parse_polygon(text: str):
    """(position, texcoord, normal) indices of a slash-separated reference, or None."""
    match = polygon_pattern.fullmatch(text)
    if match is None:
        return None
    return tuple(int(x) if x else 0 for x in match.groups(''))


class Lexer:
    def __init__(self):
        self.__buffer = []
        self.__state = LexerState.INITIAL
        self.__line = 1
        self.__column = 0

    def lex(self, stream):
        tokens = list(self.tokens(stream))
        logger.debug('lexed %d tokens', len(tokens))
        return tokens

    def tokens(self, stream):
        while True:
            char = stream.read(1)
            if not char:
                token = self._flush()
                if token is not None:
                    yield token
                break
            next_state = self._next_state(char)
            if next_state is not None:
                token = self._flush()
                if token is not None:
                    yield token
                self.__state = next_state
            self.__buffer.append(char)
            self.__column += 1

    def _next_state(self, char):
        if char in line_endings:
            # '\n' followed by '\r' is a single line break
            if self.__state is LexerState.LINEBREAK and char == '\r' and self.__buffer == ['\n']:
                return None
            return LexerState.LINEBREAK
        if char.isspace():
            if self.__state is LexerState.SEPARATOR or self.__state is LexerState.COMMENT:
                return None
            return LexerState.SEPARATOR
        if char == '#':
            if self.__state is LexerState.COMMENT:
                return None
            return LexerState.COMMENT
        if self.__state is LexerState.TOKEN or self.__state is LexerState.COMMENT:
            return None
        return LexerState.TOKEN

    def _flush(self):
        if len(self.__buffer) <= 0:
            return None
        text = ''.join(self.__buffer)
        self.__buffer = []
        line = self.__line
        column = self.__column - len(text) + 1
        if self.__state is LexerState.COMMENT:
            return Token(TokenKind.COMMENT, text, line, column)
        if self.__state is LexerState.LINEBREAK:
            self.__line += 1
            self.__column = 0
            return Token(TokenKind.LINEBREAK, text, line, column)
        if self.__state is LexerState.SEPARATOR:
            return Token(TokenKind.SEPARATOR, None, line, column)
        if text in keywords:
            return Token(keywords[text], None, line, column)
        number = parse_number(text)
        if number is not None:
            return Token(TokenKind.NUMBER, number, line, column)
        polygon = parse_polygon(text)
        if polygon is not None:
            return Token(TokenKind.POLYGON, polygon, line, column)
        return Token(TokenKind.STRING, text, line, column)


def lex(source):
    """Tokens of a readable text stream or of a string."""
    if isinstance(source, str):
        source = io.StringIO(source, newline='')
    return Lexer().lex(source)
