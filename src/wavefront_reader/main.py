import logging
import sys
import numpy
from argparse import ArgumentParser
from pathlib import Path

from . import load
from .errors import WavefrontError

logger = logging.getLogger(__name__)


def _write_objects(output, objects):
    output.write(len(objects).to_bytes(4, 'little'))
    for obj in objects:
        name = obj.name.encode('utf-8')
        output.write(len(name).to_bytes(4, 'little'))
        output.write(name)
        output.write(obj.format.value.to_bytes(4, 'little'))
        output.write(len(obj.vertex_buffer).to_bytes(4, 'little'))
        output.write(len(obj.index_buffer).to_bytes(4, 'little'))
        output.write(obj.vertex_array().astype('<f4').tobytes('C'))
        output.write(obj.index_array(dtype=numpy.uint32).astype('<u4').tobytes('C'))


def main(argv=None):
    parser = ArgumentParser(
        description='Reads a Wavefront Object file and produce indexed vertex buffers suitable for further processing, especially in shaders.',
        add_help=True
    )
    parser.add_argument('-i', '--input', type=Path, dest='input', help='Input file, standard input when omitted')
    parser.add_argument('-n', '--name', dest='name', help='Name of the object receiving faces declared before any "o" statement')
    parser.add_argument('--object', dest='object_name', help='Selects an object from the *.obj file')
    parser.add_argument('-ov', '--output-vertices', type=Path, dest='output_vertices', help='Output file for the vertex buffer of the selected object')
    parser.add_argument('-oi', '--output-indices', type=Path, dest='output_indices', help='Output file for the index buffer of the selected object')
    parser.add_argument('--list', action='store_true', dest='list_objects', help='List the objects instead of writing buffers')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug messages')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr
    )

    if (args.output_vertices is not None or args.output_indices is not None) and args.object_name is None:
        parser.error('--output-vertices and --output-indices require --object')

    if args.input is not None:
        source = str(args.input)
        default_name = args.name if args.name is not None else args.input.name
    else:
        source = '<stdin>'
        default_name = args.name if args.name is not None else 'stdin'

    try:
        if args.input is not None:
            with open(args.input.resolve(), 'r', newline='') as file:
                objects = load(file, default_name)
        else:
            if hasattr(sys.stdin, 'reconfigure'):
                # keep '\r' line endings for the lexer
                sys.stdin.reconfigure(newline='')
            objects = load(sys.stdin, default_name)
    except WavefrontError as e:
        e.source = source
        print(str(e), file=sys.stderr)
        return 1
    logger.debug('compiled %d objects from %s', len(objects), source)

    if args.object_name is not None:
        objects = [obj for obj in objects if obj.name == args.object_name]
        if len(objects) <= 0:
            parser.error('object "%s" not found' % args.object_name)

    if args.list_objects:
        for obj in objects:
            print('%s %s %d %d' % (obj.name, obj.format.name, len(obj.vertex_buffer), len(obj.index_buffer)))
        return 0

    if args.output_vertices is not None or args.output_indices is not None:
        # several objects may share a name, the first one wins
        obj = objects[0]
        if args.output_vertices is not None:
            with open(args.output_vertices.resolve(), 'wb') as file:
                file.write(obj.vertex_array().astype('<f4').tobytes())
        if args.output_indices is not None:
            with open(args.output_indices.resolve(), 'wb') as file:
                file.write(obj.index_array().tobytes())
        return 0

    _write_objects(sys.stdout.buffer, objects)
    sys.stdout.buffer.flush()
    return 0


if __name__ == '__main__':
    sys.exit(main())
