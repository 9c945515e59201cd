from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .errors import IndexOutOfRangeError, MissingPositionError


class VertexFormat(Enum):
    UNKNOWN = 0
    POSITION = 1
    POSITION_NORMAL = 2
    POSITION_TEXCOORD = 3
    POSITION_NORMAL_TEXCOORD = 4

    @classmethod
    def from_indices(cls, position, normal, texcoord):
        """Format of a (position, normal, texcoord) index triple; 0 marks an absent index."""
        if position == 0:
            raise MissingPositionError('Vertex format must have a position index')
        if normal == 0:
            return cls.POSITION if texcoord == 0 else cls.POSITION_TEXCOORD
        return cls.POSITION_NORMAL if texcoord == 0 else cls.POSITION_NORMAL_TEXCOORD

    @property
    def has_normal(self):
        return self is VertexFormat.POSITION_NORMAL or self is VertexFormat.POSITION_NORMAL_TEXCOORD

    @property
    def has_texcoord(self):
        return self is VertexFormat.POSITION_TEXCOORD or self is VertexFormat.POSITION_NORMAL_TEXCOORD

    @property
    def stride(self):
        """Number of floats of one interleaved vertex."""
        if self is VertexFormat.UNKNOWN:
            return 0
        return 3 + (3 if self.has_normal else 0) + (2 if self.has_texcoord else 0)


def _lookup(buffer, index, attribute):
    if index > len(buffer):
        raise IndexOutOfRangeError('%s index %d out of range, only %d defined' % (attribute, index, len(buffer)))
    return buffer[index - 1]


@dataclass(frozen=True)
class VertexDataIndex():
    """1-based buffer indices of a single vertex, in position, normal, texcoord order."""
    format: VertexFormat
    position: int
    normal: int = 0
    texcoord: int = 0

    @classmethod
    def from_face_reference(cls, position, texcoord, normal):
        """Converts a face reference from its source order (position, texcoord, normal)."""
        return cls(VertexFormat.from_indices(position, normal, texcoord), position, normal, texcoord)


@dataclass(frozen=True)
class VertexData():
    format: VertexFormat
    position: Tuple[float, float, float]
    normal: Optional[Tuple[float, float, float]] = None
    texcoord: Optional[Tuple[float, float]] = None

    @classmethod
    def compile(cls, index: VertexDataIndex, positions, normals, texcoords):
        """Resolves the indices against the accumulated attribute buffers."""
        position = tuple(_lookup(positions, index.position, 'position'))
        normal = None
        texcoord = None
        if index.format.has_normal:
            normal = tuple(_lookup(normals, index.normal, 'normal'))
        if index.format.has_texcoord:
            texcoord = tuple(_lookup(texcoords, index.texcoord, 'texture coordinate'))
        return cls(index.format, position, normal, texcoord)

    def values(self):
        """Attributes as one flat sequence, position then normal then texcoord."""
        values = list(self.position)
        if self.normal is not None:
            values.extend(self.normal)
        if self.texcoord is not None:
            values.extend(self.texcoord)
        return values
