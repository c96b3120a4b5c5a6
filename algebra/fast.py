"""Fast multiplication and division of univariate polynomials."""
import logging

from .univariate import Polynomial

logger = logging.getLogger(__name__)


def karatsuba(k, f, g):
    """f * g for polynomials of degree below 2**k, with 3**k coefficient
    multiplications at most."""
    n = 2 ** k
    assert f.degree < n and g.degree < n, (f.degree, g.degree, n)
    if n == 1:
        return f * g
    half = n // 2
    f0, f1 = f.truncate(half), Polynomial(f.coefficients[half:], f.field)
    g0, g1 = g.truncate(half), Polynomial(g.coefficients[half:], g.field)
    fg0 = karatsuba(k - 1, f0, g0)
    fg1 = karatsuba(k - 1, f1, g1)
    mixed = karatsuba(k - 1, f0 + f1, g0 + g1)
    logger.debug("fg0 = %r, fg1 = %r, mixed = %r", fg0, fg1, mixed)
    res = fg1.shift(n) + (mixed - fg0 - fg1).shift(half) + fg0
    logger.debug("result = %r", res)
    return res


def inversion_newton_iteration(f, l):
    """g with f * g = 1 mod x**l, for f(0) = 1."""
    assert l >= 1, l
    assert f.coef_at(0).is_one(), f"f(0) = {f.coef_at(0)!r}"
    g = f.one_like()
    for i in range(1, (l - 1).bit_length() + 1):
        g = (g + g - f * g * g).truncate(2 ** i)
        logger.debug("g_%d = %r", i, g)
    g = g.truncate(l)
    assert (f * g).truncate(l).is_one(), (f, g, l)
    return g


def fast_division_with_remainder(a, b):
    """Quotient and remainder of a by the monic b, through series inversion
    of the reversals."""
    assert b and b.is_monic(), b
    n, m = a.degree, b.degree
    if n < m:
        return a.zero_like(), a
    k = n - m
    inverse = inversion_newton_iteration(b.reversal(m), k + 1)
    q_rev = (a.reversal(n) * inverse).truncate(k + 1)
    q = q_rev.reversal(k)
    r = a - b * q
    logger.debug("q = %r, r = %r", q, r)
    return q, r
