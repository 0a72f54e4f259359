"""
Small demonstration of the codecs: takes some text as UTF-16, sends it
through UTF-8 and another encoding form, and prints every stage.

    python -m unicodec [TEXT] [--units D83F DC0F ...] [--route utf32|utf16]
"""
import argparse
import logging
import sys

from . import utf16_to_utf8, utf8_to_utf16, utf8_to_utf32, utf32_to_utf8
from .enums import Encoding
from .utils import to_units, to_text, strip_terminator

SAMPLE = 'ぐてんモルゲン\U0002f80f'

ROUTES = {
    'utf32': (
        (utf16_to_utf8, Encoding.UTF8),
        (utf8_to_utf32, Encoding.UTF32),
        (utf32_to_utf8, Encoding.UTF8),
    ),
    'utf16': (
        (utf16_to_utf8, Encoding.UTF8),
        (utf8_to_utf16, Encoding.UTF16),
        (utf16_to_utf8, Encoding.UTF8),
    ),
}


def setup_logging(level):
    # "[Time/Thread] Level: Messages"
    formatter = logging.Formatter(
        fmt='[%(asctime)s.%(msecs)03d/%(threadName)s] %(levelname)s: %(message)s',
        datefmt='%H:%M:%S')

    logger = logging.getLogger('unicodec')
    logger.setLevel(level)
    if not logger.handlers:
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        logger.addHandler(console)


def format_units(units, encoding):
    digits = encoding.value // 4
    return ' '.join('{:0{}X}'.format(u, digits) for u in strip_terminator(units))


def parse_args(argv):
    parser = argparse.ArgumentParser(
        prog='unicodec', description='Round-trip text through the codecs.')
    parser.add_argument('text', nargs='?', default=SAMPLE,
                        help='text to convert (default: a sample string)')
    parser.add_argument('--units', nargs='+', metavar='HEX',
                        help='raw UTF-16 units to use instead of TEXT')
    parser.add_argument('--route', choices=sorted(ROUTES), default='utf32',
                        help='encoding form to visit after UTF-8')
    parser.add_argument('--log', default='WARNING',
                        choices=('DEBUG', 'INFO', 'WARNING', 'ERROR'),
                        help='logging level')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log))

    if args.units:
        try:
            units = [int(x, 16) for x in args.units]
            for unit in units:
                if not 0 < unit <= Encoding.UTF16.unit_mask:
                    raise ValueError('{:X} is not a 16-bit unit'.format(unit))
        except ValueError as e:
            print('Invalid unit: {}'.format(e), file=sys.stderr)
            return 2

        units.append(0)
    else:
        units = to_units(args.text, Encoding.UTF16)

    print('{:>6}: {}'.format('UTF-16', format_units(units, Encoding.UTF16)))
    for convert, encoding in ROUTES[args.route]:
        result = convert(units)
        if not result:
            print('{} failed with status {}: {}'.format(
                convert.__name__, result.status, result.error), file=sys.stderr)
            return result.status

        units = result.units
        print('{:>6}: {}'.format(
            'UTF-{}'.format(encoding.value), format_units(units, encoding)))

    print(to_text(units, Encoding.UTF8))
    return 0


if __name__ == '__main__':
    sys.exit(main())
