from ..lib.errors import PngError
from ..lib.message import load_png, render_chunks
from ..lib.validate import validate_structure
from ..util.log import log_stdout as log
from ..util.log import log_stderr
from argparse import ArgumentDefaultsHelpFormatter
import os


def gen_parser(sub_p):
    p = sub_p.add_parser(
        'print', aliases=['info'],
        formatter_class=ArgumentDefaultsHelpFormatter,
        help='List the chunks in PNGs')
    p.add_argument('path', nargs='+', type=str, help='PNG(s) to learn about')
    p.add_argument(
        '--check', action='store_true', help='Also check that the chunks form '
        'a well formed image (IHDR first, IEND last, and so on)')


def main(args):
    ''' Describe every image we were given. Ones that can't be read are
    skipped, but make the exit status 1. '''
    ret = 0
    for image in args.path:
        if not os.path.exists(image):
            log_stderr(image, 'doesn\'t exist, so skipping.')
            ret = 1
            continue
        if os.path.isdir(image):
            log_stderr(image, 'is a directory, so skipping.')
            ret = 1
            continue
        try:
            png = load_png(image)
        except (PngError, OSError) as e:
            log_stderr(image, 'does not appear to be a valid PNG:', e)
            ret = 1
            continue
        log(image, 'contains', len(png.chunks), 'chunks')
        for line in render_chunks(png).splitlines():
            log('   ', line)
        if args.check:
            valid, error_msg = validate_structure(png)
            if valid:
                log('   ', 'Structure OK')
            else:
                log('   ', '(INVALID)', error_msg)
                ret = 1
    return ret
