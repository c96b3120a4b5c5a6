"""Multivariate division with remainder and Gröbner bases."""
from dataclasses import dataclass
import logging
from typing import List, Tuple

from .polynomials import MultivariatePolynomial

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DivisionRow:
    dividend: MultivariatePolynomial
    quotients: Tuple[MultivariatePolynomial, ...]
    remainder: MultivariatePolynomial


@dataclass(frozen=True)
class MultivariateDivision:
    """The outcome of dividing `f` by `divisors`, with every intermediate row.

    The first row is (f, 0..., 0); the last has a zero dividend, and
    sum(q_i * f_i) + remainder == f holds for every row.
    """
    f: MultivariatePolynomial
    divisors: Tuple[MultivariatePolynomial, ...]
    rows: Tuple[DivisionRow, ...]

    @property
    def quotients(self):
        return self.rows[-1].quotients

    @property
    def remainder(self):
        return self.rows[-1].remainder


def multivariate_division_with_remainder(f, fs):
    fs = tuple(fs)
    for fi in fs:
        f.order.check(fi.order)
    zero = f.zero_like()
    p = f
    q = [zero] * len(fs)
    r = zero
    rows = [DivisionRow(p, tuple(q), r)]
    while p:
        lt_p = p.leading_term()
        for i, fi in enumerate(fs):
            if not fi:
                continue
            ratio = lt_p.div(fi.leading_term())
            if ratio is not None:
                logger.debug("lt(p) = %r, divided by f%d gives %r", lt_p, i, ratio)
                q[i] = q[i] + ratio
                p = p - fi.mul_monomial(ratio)
                break
        else:
            logger.debug("lt(p) = %r moves to the remainder", lt_p)
            r = r + lt_p
            p = p - lt_p
        if p:
            assert p.leading_term() < lt_p, (p.leading_term(), lt_p)
        rows.append(DivisionRow(p, tuple(q), r))
    logger.debug("%r = %r * %r + %r", f, q, fs, r)
    return MultivariateDivision(f, fs, tuple(rows))


def remainder(f, fs):
    return multivariate_division_with_remainder(f, fs).remainder


class GroebnerBasis:
    """Generators of an ideal such that every leading term of the ideal is
    divisible by the leading term of one of them."""

    def __init__(self, generators):
        self.generators: List[MultivariatePolynomial] = list(generators)

    def __iter__(self):
        return iter(self.generators)

    def __len__(self):
        return len(self.generators)

    def __getitem__(self, index):
        return self.generators[index]

    def remainder_of(self, f):
        return remainder(f, self.generators)

    def __contains__(self, f):
        return not self.remainder_of(f)

    def __repr__(self):
        return f"GroebnerBasis({self.generators!r})"


def dedup(fs):
    seen = []
    for f in fs:
        if f and f not in seen:
            seen.append(f)
    return seen


def buchbergers_algorithm(fs):
    basis = dedup(fs)
    rounds = 0
    while True:
        rounds += 1
        new = []
        for i, f1 in enumerate(basis):
            for f2 in basis[i + 1:]:
                s = f1.s_polynomial(f2)
                r = remainder(s, basis)
                logger.debug("S(%r, %r) = %r reduces to %r", f1, f2, s, r)
                if r and r not in new and r not in basis and remainder(r, new):
                    new.append(r)
        logger.debug("round %d adds %d generators", rounds, len(new))
        if not new:
            return GroebnerBasis(basis)
        basis.extend(new)


def minimize_groebner_basis(basis):
    """Drop generators whose leading term is divisible by another's, then
    make the survivors monic. Changes `basis` in place.

    Each candidate is swapped to the front before it is tested and stays
    there if it survives, so the generators come out permuted.
    """
    gs = basis.generators
    i = 0
    while i < len(gs):
        gs[0], gs[i] = gs[i], gs[0]
        lt = MultivariatePolynomial(gs[0].order, [gs[0].leading_term()], gs[0].field)
        rest = [MultivariatePolynomial(g.order, [g.leading_term()], g.field)
                for g in gs[1:]]
        if not remainder(lt, rest):
            logger.debug("dropping %r", gs[0])
            del gs[0]
        else:
            i += 1
    gs[:] = [g.minimize() for g in gs]


def reduce_groebner_basis(basis):
    """The reduced Gröbner basis: minimal, monic, and no term of a generator
    divisible by the leading term of another. Returns a new basis."""
    gs = GroebnerBasis(basis.generators)
    minimize_groebner_basis(gs)
    gs = gs.generators
    changed = True
    while changed:
        changed = False
        for i, g in enumerate(gs):
            r = remainder(g, gs[:i] + gs[i + 1:]).minimize()
            if r != g:
                logger.debug("%r reduces to %r", g, r)
                gs[i] = r
                changed = True
    return GroebnerBasis(gs)
