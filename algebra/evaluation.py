"""Fast multipoint evaluation and interpolation through subproduct trees,
plus Newton interpolation by divided differences."""
import logging

from .fields import Rational
from .structures import Field
from .univariate import Polynomial

logger = logging.getLogger(__name__)


class SamplesNotUniqueError(ValueError):
    pass


def is_power_of_two(n):
    return n > 0 and n & (n - 1) == 0


class SubproductTree:
    """levels[0] holds x - u for every point; levels[i][j] is the product of
    levels[i - 1][2j] and levels[i - 1][2j + 1]; levels[-1][0] is the
    product of all of them."""

    def __init__(self, points, levels):
        self.points = points
        self.levels = levels

    @property
    def k(self):
        return len(self.levels) - 1

    @property
    def root(self):
        return self.levels[-1][0]

    def going_down(self, p, i=None, j=0):
        """The values of p at the points under node (i, j), the root by default."""
        if i is None:
            i = self.k
        if i == 0:
            return [p.evaluate(self.points[j])]
        r0 = p % self.levels[i - 1][2 * j]
        r1 = p % self.levels[i - 1][2 * j + 1]
        logger.debug("r0 = %r, r1 = %r", r0, r1)
        return self.going_down(r0, i - 1, 2 * j) + self.going_down(r1, i - 1, 2 * j + 1)

    def linear_combination(self, cs, i=None, j=0):
        """sum(cs[l] * m / (x - u_l)) for m the product under node (i, j)."""
        if i is None:
            i = self.k
        if i == 0:
            return Polynomial.constant(self.root.field, cs[j])
        s0 = self.linear_combination(cs, i - 1, 2 * j)
        s1 = self.linear_combination(cs, i - 1, 2 * j + 1)
        return self.levels[i - 1][2 * j + 1] * s0 + self.levels[i - 1][2 * j] * s1


def field_of(points, field=None):
    """The field `points` live in. Plain numbers and integers default to
    the rationals."""
    if field is not None:
        return field
    first = points[0]
    return type(first) if isinstance(first, Field) else Rational


def building_up_the_subproduct_tree(us, field=None):
    n = len(us)
    assert is_power_of_two(n), f"{n} points, not a power of two"
    field = field_of(us, field)
    us = [field.coerce(u) for u in us]
    x = Polynomial.x(field)
    levels = [[x - u for u in us]]
    while len(levels[-1]) > 1:
        below = levels[-1]
        levels.append([below[2 * j] * below[2 * j + 1] for j in range(len(below) // 2)])
    return SubproductTree(us, levels)


def fast_multipoint_evaluation(f, us):
    return building_up_the_subproduct_tree(us, f.field).going_down(f)


def linear_combination_for_linear_moduli(us, cs, field=None):
    return building_up_the_subproduct_tree(us, field).linear_combination(cs)


def fast_interpolation(us, vs, field=None):
    """The polynomial of degree below len(us) through (us[i], vs[i])."""
    assert len(us) == len(vs), (us, vs)
    tree = building_up_the_subproduct_tree(us, field)
    field = tree.root.field
    m = tree.root
    logger.debug("m = %r", m)
    derivative = m.derivative()
    logger.debug("m' = %r", derivative)
    s = [field.coerce(v) / d for v, d in zip(vs, tree.going_down(derivative))]
    return tree.linear_combination(s)


def newton_interpolation(samples, field=None):
    """Interpolate (u, v) pairs through divided differences."""
    samples = list(samples)
    if not samples:
        raise ValueError("no samples")
    field = field_of([u for u, _ in samples], field)
    us = [field.coerce(u) for u, _ in samples]
    for i, u in enumerate(us):
        if any(u == w for w in us[:i]):
            raise SamplesNotUniqueError(f"{u!r} is sampled twice")
    n = len(us)
    # table[i] holds f[u_0..u_i] at index i and is reused in place
    table = [field.coerce(v) for _, v in samples]
    for i in range(1, n):
        for j in range(n - 1, i - 1, -1):
            table[j] = (table[j] - table[j - 1]) / (us[j] - us[j - i])
        logger.debug("divided differences of order %d: %r", i, table[i:])
    p = Polynomial.constant(field, table[n - 1])
    for i in range(n - 2, -1, -1):
        p = p.shift(1) - p.scale(us[i]) + table[i]
    return p
