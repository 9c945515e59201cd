import numpy

from .errors import FormatChangeError
from .vertex import VertexFormat


class Object3d:
    """A named mesh with a single vertex layout, deduplicated vertices and a triangle index buffer."""

    def __init__(self, name: str):
        self.name = name
        self.format = VertexFormat.UNKNOWN
        self.vertex_buffer = []
        self.index_buffer = []
        self.__vertex_map = {}

    def __repr__(self):
        return 'Object3d(name=%r, format=%s, vertices=%d, indices=%d)' % (
            self.name, self.format.name, len(self.vertex_buffer), len(self.index_buffer)
        )

    def add_vertex(self, vertex):
        if self.format is VertexFormat.UNKNOWN:
            self.format = vertex.format
        elif self.format is not vertex.format:
            raise FormatChangeError('Vertex format changed within object "%s" from %s to %s' % (self.name, self.format.name, vertex.format.name))
        index = self.__vertex_map.get(vertex)
        if index is None:
            index = len(self.vertex_buffer)
            self.__vertex_map[vertex] = index
            self.vertex_buffer.append(vertex)
        self.index_buffer.append(index)
        return index

    def vertex_array(self):
        """Interleaved float32 vertex data, one row per vertex."""
        return numpy.array(
            [vertex.values() for vertex in self.vertex_buffer],
            dtype=numpy.float32
        ).reshape((len(self.vertex_buffer), self.format.stride))

    def index_array(self, dtype=None):
        if dtype is None:
            if len(self.vertex_buffer) < 256:
                dtype = numpy.uint8
            elif len(self.vertex_buffer) < 65536:
                dtype = numpy.uint16
            else:
                dtype = numpy.uint32
        return numpy.array(self.index_buffer, dtype=dtype)
