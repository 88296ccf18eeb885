"""Entry point for console script jpegdump."""
# Standard library imports ...
import argparse
import logging
import warnings

# Local imports ...
from . import Jpeg, set_option
from .codestream import InvalidJPEGError
from .jpeg import LoadError


def setup_logging(verbosity):
    """Send log messages from the package to stderr."""
    logger = logging.getLogger('jpegmarkers')
    logger.setLevel(verbosity)
    ch = logging.StreamHandler()
    ch.setLevel(verbosity)
    ch.setFormatter(
        logging.Formatter('[jpegdump] %(asctime)s %(levelname)s %(message)s')
    )
    logger.addHandler(ch)
    return logger


def _positive_float(value):
    """Argument type for a number of seconds."""
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f'{value} is not a number')
    if seconds <= 0:
        raise argparse.ArgumentTypeError(f'{value} is not positive')
    return seconds


def main():
    """Entry point for console script jpegdump."""

    kwargs = {'description': 'Print JPEG marker segments.',
              'formatter_class': argparse.ArgumentDefaultsHelpFormatter}
    parser = argparse.ArgumentParser(**kwargs)

    parser.add_argument('-s', '--short',
                        help='only print marker id, offset, and length',
                        action='store_true')

    help = (
        'Abort on an unrecognized marker instead of skipping ahead to the '
        'next one.'
    )
    parser.add_argument('--strict', help=help, action='store_true')

    help = 'Seconds to wait on the server when the path is an http(s) URL.'
    parser.add_argument(
        '--timeout', type=_positive_float, help=help, default=None
    )

    help = (
        'Logging level, one of "critical", "error", "warning", "info", '
        'or "debug".'
    )
    parser.add_argument(
        '--verbosity', help=help, default='warning',
        choices=['critical', 'error', 'warning', 'info', 'debug']
    )

    parser.add_argument('path', help='JPEG file or http(s) link to one.')

    args = parser.parse_args()

    logger = setup_logging(getattr(logging, args.verbosity.upper()))

    if args.short:
        set_option('print.short', True)
    if args.strict:
        set_option('parse.strict', True)
    if args.timeout is not None:
        set_option('lib.http_timeout', args.timeout)

    # Don't print any warnings until we are done with the markers.
    with warnings.catch_warnings(record=True) as wctx:
        warnings.simplefilter('always')

        try:
            jpg = Jpeg(args.path)
        except (LoadError, InvalidJPEGError) as e:
            logger.error(str(e))
            return 1

        print(jpg)

        # Now re-emit any suppressed warnings.
        if len(wctx) > 0:
            print("\n")
        for warning in wctx:
            print(
                f"{warning.filename}:{warning.lineno}: "
                f"{warning.category.__name__}: {warning.message}"
            )

    return 0
