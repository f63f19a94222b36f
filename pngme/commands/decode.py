from ..lib.errors import PngError
from ..lib.message import decode_message
from ..util.crypto import get_password
from ..util.log import log_stdout as log
from ..util.log import fail_hard
from argparse import ArgumentDefaultsHelpFormatter
import os


def gen_parser(sub_p):
    p = sub_p.add_parser(
        'decode', formatter_class=ArgumentDefaultsHelpFormatter,
        help='Print the message hidden in a chunk')
    p.add_argument('path', type=str, help='PNG to look in')
    p.add_argument('chunk_type', type=str,
                   help='4 letter type of the chunk holding the message')
    p.add_argument(
        '-e', '--encrypted', action='store_true', help='The message was '
        'encrypted. Prompt for the passphrase unless --key-file is given.')
    p.add_argument(
        '--key-file', type=str, default=None,
        help='If the message was encrypted, read the passphrase from this '
        'file.')


def main(args):
    if not os.path.isfile(args.path):
        fail_hard(args.path, 'must exist')
    if args.key_file is not None and not os.path.isfile(args.key_file):
        fail_hard(args.key_file, 'must be a file')
    password = None
    if args.encrypted or args.key_file:
        password = get_password(args.key_file, for_encryption=False)
    try:
        message = decode_message(args.path, args.chunk_type, password=password)
    except (PngError, OSError) as e:
        fail_hard('Unable to decode message:', e)
    if message is None:
        fail_hard('Nothing to decode')
    log(message)
    return 0
