import logging
import re
import string
from collections import namedtuple
from collections.abc import Mapping

import gmpy2

from .errors import (EmptyValue, InvalidBase, InvalidDigitForBase, InvalidIndex,
                     MalformedRecord)

logger = logging.getLogger(__name__)

Point = namedtuple('Point', ['x', 'y'])
Record = namedtuple('Record', ['x', 'base', 'digits'])

# Letters extend the numeric range past 9, 'a' and 'A' both meaning 10
CASELESS_DIGITS = {c: i for i, c in enumerate(string.digits + string.ascii_lowercase)}
CASELESS_DIGITS.update({c.upper(): i for c, i in CASELESS_DIGITS.items()})

# GMP's 62 symbol alphabet, where 'A' is 10 and 'a' is 36
CASED_DIGITS = {c: i for i, c in
                enumerate(string.digits + string.ascii_uppercase + string.ascii_lowercase)}

INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')
DIGITS_PATTERN = re.compile(r'[0-9]+')


def max_base(case_sensitive=False):
    return 62 if case_sensitive else 36


def digit_value(char, case_sensitive=False):
    """Value of a single digit character, or None if it is not in the alphabet."""
    table = CASED_DIGITS if case_sensitive else CASELESS_DIGITS
    return table.get(char)


def parse_index(x):
    if isinstance(x, int) and not isinstance(x, bool):
        return x
    if isinstance(x, str) and INTEGER_PATTERN.fullmatch(x.strip()):
        return int(x.strip())
    raise InvalidIndex(x)


def parse_base(base, case_sensitive=False):
    top = max_base(case_sensitive)
    if isinstance(base, str) and DIGITS_PATTERN.fullmatch(base.strip()):
        base = int(base.strip())
    if not isinstance(base, int) or isinstance(base, bool) or not 2 <= base <= top:
        raise InvalidBase(base, top)
    return base


def decode_value(digits, base, case_sensitive=False):
    """
    Read a digit string in the given base, most significant digit first.

    The base is authoritative: a string is never reinterpreted because of
    the characters it happens to contain.
    """
    base = parse_base(base, case_sensitive)
    if not digits:
        raise EmptyValue()
    table = CASED_DIGITS if case_sensitive else CASELESS_DIGITS
    y = gmpy2.mpz(0)
    for char in digits:
        v = table.get(char)
        if v is None or v >= base:
            raise InvalidDigitForBase(digits, char, base)
        y = y * base + v
    return int(y)


def decode(record, case_sensitive=False):
    try:
        if isinstance(record, Mapping):
            x, base, digits = record['x'], record['base'], record['digits']
        else:
            x, base, digits = record
    except (KeyError, TypeError, ValueError) as e:
        raise MalformedRecord(record) from e
    if not isinstance(digits, str):
        raise MalformedRecord(record)
    base = parse_base(base, case_sensitive)
    point = Point(parse_index(x), decode_value(digits, base, case_sensitive))
    logger.debug('decoded %r in base %d to point (%d, %d)', digits, base, point.x, point.y)
    return point


def encode(value, base, case_sensitive=False):
    base = parse_base(base, case_sensitive)
    out = gmpy2.mpz(value).digits(base)
    # gmpy2 writes bases up to 36 in lower case
    if case_sensitive and base <= 36:
        out = out.upper()
    return out
