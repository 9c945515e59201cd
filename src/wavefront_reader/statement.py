from dataclasses import dataclass
from enum import Enum
from typing import Any

from .token import TokenKind


class StatementKind(Enum):
    COMMENT = 'comment'
    MTLLIB = 'mtllib'
    OBJECT = 'object'
    VERTEX = 'vertex'
    NORMAL = 'normal'
    TEXCOORD = 'texcoord'
    USEMTL = 'usemtl'
    FACE = 'face'
    ILLUM = 'illum'

    def __str__(self):
        return self.value

    @classmethod
    def from_token_kind(cls, kind: TokenKind):
        """Statement opened by a header token, or None if the token cannot start one."""
        return header_kinds.get(kind)


header_kinds = {
    TokenKind.COMMENT: StatementKind.COMMENT,
    TokenKind.MTLLIB: StatementKind.MTLLIB,
    TokenKind.OBJECT: StatementKind.OBJECT,
    TokenKind.VERTEX: StatementKind.VERTEX,
    TokenKind.NORMAL: StatementKind.NORMAL,
    TokenKind.TEXCOORD: StatementKind.TEXCOORD,
    TokenKind.USEMTL: StatementKind.USEMTL,
    TokenKind.FACE: StatementKind.FACE,
    TokenKind.ILLUM: StatementKind.ILLUM,
}


@dataclass(frozen=True)
class Statement():
    # data: comment text, a name, a 1-3 float tuple, or the 9 face indices
    # (p1, t1, n1, p2, t2, n2, p3, t3, n3) with 0 marking an absent index
    kind: StatementKind
    data: Any = None
    line: int = 1
    column: int = 1
