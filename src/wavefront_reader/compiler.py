import logging

from .errors import CompileError, WavefrontError
from .object3d import Object3d
from .statement import StatementKind
from .vertex import VertexData, VertexDataIndex

logger = logging.getLogger(__name__)

statement_handlers = {
    StatementKind.COMMENT: '_skip_statement',
    StatementKind.MTLLIB: '_ignore_statement',
    StatementKind.USEMTL: '_ignore_statement',
    StatementKind.ILLUM: '_ignore_statement',
    StatementKind.VERTEX: 'compile_position',
    StatementKind.NORMAL: 'compile_normal',
    StatementKind.TEXCOORD: 'compile_texcoord',
    StatementKind.OBJECT: 'compile_object',
    StatementKind.FACE: 'compile_face',
}


class Compiler:
    """Reduces a statement sequence to a list of `Object3d`.

    Faces that appear before any `o` statement go into an object named
    `default_name`. A fresh compiler should be used per compilation.
    """

    def __init__(self, default_name: str):
        self.default_name = default_name
        self.__positions = []
        self.__normals = []
        self.__texcoords = []
        self.__current_object = None
        self.__objects = []

    def compile(self, statements):
        for statement in statements:
            try:
                getattr(self, statement_handlers[statement.kind])(statement)
            except WavefrontError as e:
                e.locate(statement.line, statement.column)
                raise
        self._finalize_object()
        objects = self.__objects
        self.__objects = []
        return objects

    def compile_position(self, statement):
        self.__positions.append(statement.data)

    def compile_normal(self, statement):
        self.__normals.append(statement.data)

    def compile_texcoord(self, statement):
        self.__texcoords.append(statement.data)

    def compile_object(self, statement):
        if not isinstance(statement.data, str):
            raise CompileError('Object statement must carry a name')
        self._finalize_object()
        self._start_object(statement.data)

    def compile_face(self, statement):
        if self.__current_object is None:
            self._start_object(self.default_name)
        data = statement.data
        if not isinstance(data, tuple) or len(data) != 9:
            raise CompileError('Face statement must carry 9 indices')
        for k in range(0, 9, 3):
            index = VertexDataIndex.from_face_reference(*data[k:k + 3])
            vertex = VertexData.compile(index, self.__positions, self.__normals, self.__texcoords)
            self.__current_object.add_vertex(vertex)

    def _skip_statement(self, statement):
        pass

    def _ignore_statement(self, statement):
        # materials and smoothing groups are recognized but not modeled
        logger.debug('ignoring %s statement at %d:%d', statement.kind, statement.line, statement.column)

    def _start_object(self, name):
        logger.debug('starting object "%s"', name)
        self.__current_object = Object3d(name)

    def _finalize_object(self):
        if self.__current_object is None:
            return
        current_object = self.__current_object
        logger.debug(
            'finalized object "%s": %s, %d vertices, %d indices',
            current_object.name, current_object.format.name, len(current_object.vertex_buffer), len(current_object.index_buffer)
        )
        self.__objects.append(current_object)
        self.__current_object = None


def compile_statements(statements, default_name):
    return Compiler(default_name).compile(statements)
