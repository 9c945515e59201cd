from dataclasses import dataclass
from enum import Enum
from typing import Any


class TokenKind(Enum):
    COMMENT = 'comment'
    MTLLIB = 'mtllib'
    OBJECT = 'object'
    VERTEX = 'vertex'
    NORMAL = 'normal'
    TEXCOORD = 'texcoord'
    USEMTL = 'usemtl'
    FACE = 'face'
    ILLUM = 'illum'
    NUMBER = 'number'
    STRING = 'string'
    POLYGON = 'polygon'
    SEPARATOR = 'separator'
    LINEBREAK = 'linebreak'

    def __str__(self):
        return self.name


keywords = {
    'mtllib': TokenKind.MTLLIB,
    'o': TokenKind.OBJECT,
    'v': TokenKind.VERTEX,
    'vn': TokenKind.NORMAL,
    'vt': TokenKind.TEXCOORD,
    'usemtl': TokenKind.USEMTL,
    'f': TokenKind.FACE,
    's': TokenKind.ILLUM,
}


@dataclass(frozen=True)
class Token():
    # payload: None, float (NUMBER), str or (position, texcoord, normal) for POLYGON
    kind: TokenKind
    payload: Any = None
    line: int = 1
    column: int = 1
