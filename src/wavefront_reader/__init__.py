import io
from pathlib import Path

from .compiler import Compiler, compile_statements
from .errors import (
    CompileError,
    FormatChangeError,
    IndexOutOfRangeError,
    MissingPositionError,
    ParseError,
    WavefrontError,
)
from .lexer import Lexer, lex
from .object3d import Object3d
from .parser import Parser, parse
from .statement import Statement, StatementKind
from .token import Token, TokenKind
from .vertex import VertexData, VertexDataIndex, VertexFormat


def load(stream, default_name: str):
    """Compiles a readable text stream into a list of `Object3d`."""
    tokens = Lexer().lex(stream)
    statements = Parser().parse(tokens)
    return Compiler(default_name).compile(statements)


def loads(text: str, default_name: str):
    return load(io.StringIO(text, newline=''), default_name)


def load_file(path, default_name=None):
    path = Path(path)
    if default_name is None:
        default_name = path.name
    # newline='' keeps '\r' and '\n\r' for the lexer
    with open(path, 'r', newline='') as file:
        try:
            return load(file, default_name)
        except WavefrontError as e:
            e.source = str(path)
            raise
