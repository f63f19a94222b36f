from ..lib.errors import PngError
from ..lib.message import remove_message
from ..util.log import log_stdout as log
from ..util.log import fail_hard
from argparse import ArgumentDefaultsHelpFormatter
import os


def gen_parser(sub_p):
    p = sub_p.add_parser(
        'remove', formatter_class=ArgumentDefaultsHelpFormatter,
        help='Remove the first chunk of a type')
    p.add_argument('path', type=str, help='PNG to remove the chunk from')
    p.add_argument('chunk_type', type=str,
                   help='4 letter type of the chunk to remove')
    p.add_argument('-o', '--output', type=str, default=None,
                   help='Where to write the resulting PNG. If not given, '
                   'overwrite the input.')


def main(args):
    if not os.path.isfile(args.path):
        fail_hard(args.path, 'must exist')
    try:
        chunk = remove_message(args.path, args.chunk_type, args.output)
    except (PngError, OSError) as e:
        fail_hard('Unable to remove chunk:', e)
    log('Removed', chunk.describe())
    return 0
