from ..lib.errors import PngError
from ..lib.message import encode_message, DEFAULT_OUTPUT
from ..util.crypto import get_password
from ..util.log import log_stdout as log
from ..util.log import fail_hard
from argparse import ArgumentDefaultsHelpFormatter
import os


def gen_parser(sub_p):
    p = sub_p.add_parser(
        'encode', formatter_class=ArgumentDefaultsHelpFormatter,
        help='Hide a message in a new chunk')
    p.add_argument('path', type=str, help='PNG to hide the message in')
    p.add_argument('chunk_type', type=str,
                   help='4 letter type of the chunk to put the message in')
    p.add_argument('message', type=str, help='The message to hide')
    p.add_argument('output', type=str, nargs='?', default=DEFAULT_OUTPUT,
                   help='Where to write the resulting PNG')
    p.add_argument(
        '--append', action='store_true', help='Put the new chunk after IEND '
        'instead of right before it')
    p.add_argument(
        '-e', '--encrypt', action='store_true', help='If specified, encrypt '
        'the message before hiding it')
    p.add_argument(
        '--key-file', type=str, default=None,
        help='If encrypting, read the passphrase from this file instead of '
        'prompting for it')


def main(args):
    if not os.path.isfile(args.path):
        fail_hard(args.path, 'must exist')
    if args.encrypt:
        if args.key_file is not None and not os.path.isfile(args.key_file):
            fail_hard(args.key_file, 'must be a file')
        password = get_password(args.key_file, for_encryption=True)
    elif args.key_file:
        fail_hard('Don\'t specify --key-file when not doing encryption')
    else:
        password = None
    try:
        chunk = encode_message(
            args.path, args.chunk_type, args.message, args.output,
            password=password, append=args.append)
    except (PngError, OSError) as e:
        fail_hard('Unable to encode message:', e)
    log('Wrote', args.output, 'with', chunk.describe())
    return 0
