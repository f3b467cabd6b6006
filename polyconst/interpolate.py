import logging
import multiprocessing as mp
import os
from functools import partial

import gmpy2

from .decoder import Point
from .errors import DuplicateXError, EmptyPointSet, NonExactDivision

logger = logging.getLogger(__name__)


def check_distinct(points):
    seen = set()
    for x, _ in points:
        if x in seen:
            raise DuplicateXError(x)
        seen.add(x)


# The j'th term of the Lagrange sum at zero:
#
#   y_j * prod_{i != j} (-x_i) / prod_{i != j} (x_j - x_i)
#
# Terms are exact rationals. With integer coefficients the whole sum is an
# integer, but a single term need not be, eg. the line y = x through (1, 1)
# and (3, 3) gives terms 3/2 and -3/2.
def lagrange_term(points, j):
    xj, yj = points[j]
    num = gmpy2.mpz(yj)
    den = gmpy2.mpz(1)
    for i, (xi, _) in enumerate(points):
        if i == j:
            continue
        if xi == xj:
            raise DuplicateXError(xj)
        num *= -xi
        den *= xj - xi
    return gmpy2.mpq(num, den)


def interpolate_at_zero(points, processes=None):
    """
    Value at x = 0 of the unique polynomial of degree < len(points) passing
    through every point, ie. its constant term.

    The terms are summed as exact rationals and the result is divided out
    with an explicit remainder check, so inconsistent data raises
    NonExactDivision instead of coming back truncated.
    """
    if processes is not None and processes < 1:
        raise ValueError('processes must be at least 1, got %r' % (processes,))
    points = [Point(*p) for p in points]
    if not points:
        raise EmptyPointSet()
    check_distinct(points)
    if len(points) == 1:
        return int(points[0].y)

    term = partial(lagrange_term, points)
    if processes and processes > 1:
        ctx = mp.get_context('spawn' if os.name == 'nt' else 'fork')
        with ctx.Pool(processes=processes) as pool:
            terms = list(pool.imap_unordered(term, range(len(points))))
    else:
        terms = [term(j) for j in range(len(points))]

    total = sum(terms, gmpy2.mpq(0))
    numerator, denominator = total.numerator, total.denominator
    quotient, remainder = gmpy2.f_divmod(numerator, denominator)
    if remainder:
        raise NonExactDivision(int(numerator), int(denominator), int(remainder))
    logger.debug('constant term over %d points is %d', len(points), quotient)
    return int(quotient)
