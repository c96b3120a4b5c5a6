"""The extended Euclidean algorithm and the Chinese remainder algorithm."""
from dataclasses import dataclass, field
from functools import reduce
import logging
from operator import mul
from typing import List

from tabulate import tabulate

logger = logging.getLogger(__name__)


@dataclass
class ExtendedEuclideanAlgorithm:
    """Every row of the traditional extended Euclidean algorithm.

    r[i] = s[i] * f + t[i] * g for every i; the last remainder is zero and
    the gcd is the one before it. q[0] is a zero placeholder so that
    q[i] is the quotient that produced r[i + 1].
    """
    r: List = field(default_factory=list)
    s: List = field(default_factory=list)
    t: List = field(default_factory=list)
    q: List = field(default_factory=list)

    @property
    def gcd(self):
        return self.r[-2]

    def table(self):
        rows = [(i, repr(self.q[i]) if i < len(self.q) else "",
                 repr(self.r[i]), repr(self.s[i]), repr(self.t[i]))
                for i in range(len(self.r))]
        return tabulate(rows, headers=["i", "q", "r", "s", "t"], disable_numparse=True)


def extended_euclidean_algorithm(f, g):
    one, zero = f.one_like(), f.zero_like()
    eea = ExtendedEuclideanAlgorithm([f, g], [one, zero], [zero, one], [zero])
    r, s, t, q = eea.r, eea.s, eea.t, eea.q
    i = 1
    while not r[i].is_zero():
        q.append(r[i - 1] // r[i])
        r.append(r[i - 1] - q[i] * r[i])
        s.append(s[i - 1] - q[i] * s[i])
        t.append(t[i - 1] - q[i] * t[i])
        logger.debug("q = %r, r = %r, s = %r, t = %r", q[i], r[-1], s[-1], t[-1])
        i += 1
    return eea


def gcd_divides_inputs(f, g):
    gcd = extended_euclidean_algorithm(f, g).gcd
    return (f % gcd).is_zero() and (g % gcd).is_zero()


def chinese_remainder_algorithm(ms, vs):
    """The c with c = vs[i] mod ms[i] for every i, in [0, prod(ms)).

    The moduli must be pairwise coprime.
    """
    assert ms and len(ms) == len(vs), (ms, vs)
    m = reduce(mul, ms)
    logger.debug("m = %r", m)
    c = []
    for i, (mi, vi) in enumerate(zip(ms, vs)):
        eea = extended_euclidean_algorithm(m // mi, mi)
        ci = (vi * eea.s[-2]) % mi
        logger.debug("c%d = %r", i, ci)
        c.append(ci)
    res = sum((ci * (m // mi) for ci, mi in zip(c, ms)), m.zero_like()) % m
    while res < res.zero_like():
        res = (res + m) % m
    return res
