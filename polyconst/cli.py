import argparse
import logging
import sys
from collections.abc import Mapping

from .decoder import decode
from .errors import PolyconstError
from .interpolate import interpolate_at_zero
from .records import check_keys, load_records, parse_records

logger = logging.getLogger(__name__)


def solve(source, case_sensitive=False, processes=None):
    if isinstance(source, Mapping):
        records, keys = parse_records(source)
    else:
        records, keys = load_records(source)
    check_keys(records, keys)
    points = [decode(r, case_sensitive=case_sensitive) for r in records]
    logger.info('decoded %d points', len(points))
    return interpolate_at_zero(points, processes=processes)


def positive_int(text):
    n = int(text)
    if n < 1:
        raise argparse.ArgumentTypeError('must be at least 1, got %d' % n)
    return n


def main(argv=None):
    ap = argparse.ArgumentParser(
        prog='polyconst',
        description='Recover the constant term of a polynomial from base-encoded sample points.')
    ap.add_argument('input', help='JSON file of encoded points')
    ap.add_argument('--case-sensitive', action='store_true',
                    help="use the 62 symbol alphabet where 'A' and 'a' differ")
    ap.add_argument('--processes', type=positive_int, default=None,
                    help='compute Lagrange terms in this many worker processes')
    ap.add_argument('-v', '--verbose', action='store_true', help='log every decoded point')
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(levelname)s %(name)s: %(message)s')
    try:
        constant = solve(args.input, case_sensitive=args.case_sensitive,
                         processes=args.processes)
    except (PolyconstError, OSError) as e:
        print('error: %s' % e, file=sys.stderr)
        return 1
    print(constant)
    return 0
