import pngme.commands.info
import pngme.commands.encode
import pngme.commands.decode
import pngme.commands.remove
from pngme.util.log import set_verbose
from argparse import ArgumentParser, ArgumentDefaultsHelpFormatter
import sys


PNGME_VERSION = '0.1.0'


def create_parser():
    p = ArgumentParser(formatter_class=ArgumentDefaultsHelpFormatter)
    p.add_argument('--version', action='version',
                   version='%(prog)s ' + PNGME_VERSION)
    p.add_argument('-v', '--verbose', action='store_true',
                   help='Log debug information to stderr')
    sub_p = p.add_subparsers(dest='command')
    pngme.commands.encode.gen_parser(sub_p)
    pngme.commands.decode.gen_parser(sub_p)
    pngme.commands.remove.gen_parser(sub_p)
    pngme.commands.info.gen_parser(sub_p)
    return p


def main(argv=None):
    parser = create_parser()
    args = parser.parse_args(argv)
    set_verbose(args.verbose)
    def_args = [args]
    def_kwargs = {}
    known_commands = {
        'encode': {'f': pngme.commands.encode.main,
                   'a': def_args, 'kw': def_kwargs},
        'decode': {'f': pngme.commands.decode.main,
                   'a': def_args, 'kw': def_kwargs},
        'remove': {'f': pngme.commands.remove.main,
                   'a': def_args, 'kw': def_kwargs},
        'print': {'f': pngme.commands.info.main,
                  'a': def_args, 'kw': def_kwargs},
    }
    # argparse reports an alias under its own name
    known_commands['info'] = known_commands['print']
    try:
        if args.command not in known_commands:
            parser.print_help()
        else:
            comm = known_commands[args.command]
            sys.exit(comm['f'](*comm['a'], **comm['kw']))
    except KeyboardInterrupt:
        print('')


if __name__ == '__main__':
    main()
