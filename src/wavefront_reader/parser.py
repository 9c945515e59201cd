import logging

from .errors import ParseError
from .statement import Statement, StatementKind
from .token import TokenKind

logger = logging.getLogger(__name__)

# statement kind -> (number of fields, token kind of every field)
statement_fields = {
    StatementKind.COMMENT: (0, None),
    StatementKind.MTLLIB: (1, TokenKind.STRING),
    StatementKind.OBJECT: (1, TokenKind.STRING),
    StatementKind.USEMTL: (1, TokenKind.STRING),
    StatementKind.VERTEX: (3, TokenKind.NUMBER),
    StatementKind.NORMAL: (3, TokenKind.NUMBER),
    StatementKind.TEXCOORD: (2, TokenKind.NUMBER),
    StatementKind.ILLUM: (1, TokenKind.NUMBER),
    StatementKind.FACE: (3, TokenKind.POLYGON),
}


class Parser:
    """Assembles tokens into statements, one statement per logical line.

    `feed` takes one token at a time and returns the statement it completes,
    if any. Separators and line breaks between statements are skipped.
    """

    def __init__(self):
        self._reset()

    def _reset(self):
        self.__kind = None
        self.__header = None
        self.__fields = []
        self.__expected = None

    def parse(self, tokens):
        statements = []
        for token in tokens:
            statement = self.feed(token)
            if statement is not None:
                statements.append(statement)
        statement = self.finish()
        if statement is not None:
            statements.append(statement)
        logger.debug('parsed %d statements', len(statements))
        return statements

    def feed(self, token):
        if self.__kind is None:
            self._open_statement(token)
            return None
        if token.kind is not self.__expected:
            raise self._unexpected(token)
        if token.kind is TokenKind.LINEBREAK:
            return self._close_statement()
        arity, field_kind = statement_fields[self.__kind]
        if token.kind is TokenKind.SEPARATOR:
            self.__expected = field_kind
        else:
            self.__fields.append(token.payload)
            self.__expected = TokenKind.LINEBREAK if len(self.__fields) >= arity else TokenKind.SEPARATOR
        return None

    def finish(self):
        """Closes the statement left open by input that does not end with a line break."""
        if self.__kind is None:
            return None
        if self.__expected is not TokenKind.LINEBREAK:
            arity, _ = statement_fields[self.__kind]
            raise ParseError(
                'Unexpected end of input: "%s" statement expects %d fields but found %d' % (self.__kind, arity, len(self.__fields)),
                self.__header.line,
                self.__header.column
            )
        return self._close_statement()

    def _open_statement(self, token):
        if token.kind is TokenKind.SEPARATOR or token.kind is TokenKind.LINEBREAK:
            return
        kind = StatementKind.from_token_kind(token.kind)
        if kind is None:
            raise ParseError('Expected statement start but found %s' % token.kind, token.line, token.column)
        self.__kind = kind
        self.__header = token
        if kind is StatementKind.COMMENT:
            self.__expected = TokenKind.LINEBREAK
        else:
            self.__expected = TokenKind.SEPARATOR

    def _close_statement(self):
        kind = self.__kind
        header = self.__header
        if kind is StatementKind.COMMENT:
            data = header.payload
        elif kind is StatementKind.FACE:
            data = sum(self.__fields, ())
            if len(data) != 9:
                raise ParseError('Expected face statement to have 9 indices but found %d' % len(data), header.line, header.column)
        elif statement_fields[kind][1] is TokenKind.STRING:
            data = self.__fields[0]
        else:
            data = tuple(self.__fields)
        self._reset()
        return Statement(kind, data, header.line, header.column)

    def _unexpected(self, token):
        arity, _ = statement_fields[self.__kind]
        if token.kind is TokenKind.LINEBREAK and len(self.__fields) < arity:
            message = '"%s" statement expects %d fields but found %d' % (self.__kind, arity, len(self.__fields))
        elif self.__expected is TokenKind.LINEBREAK and token.kind is TokenKind.SEPARATOR:
            message = 'Unexpected %s after the last field of "%s" statement' % (token.kind, self.__kind)
        else:
            message = 'Unexpected token %s, expected %s' % (token.kind, self.__expected)
        return ParseError(message, token.line, token.column)


def parse(tokens):
    return Parser().parse(tokens)
