import sys

_verbose = False


def set_verbose(verbose):
    global _verbose
    _verbose = bool(verbose)


def log_stderr(*a, **kw):
    print(*a, file=sys.stderr, **kw)


def log_stdout(*a, **kw):
    print(*a, **kw)


def log_debug(*a, **kw):
    ''' Like log_stderr, but only says anything when --verbose was given '''
    if _verbose:
        log_stderr('[debug]', *a, **kw)


def fail_hard(*a, **kw):
    if a:
        log_stderr(*a, **kw)
    sys.exit(1)
