import logging
import os
import sys

from algebra.config import setup_logging
from algebra.counting import OpCounter, counting
from algebra.dft import PrimitiveRootOfUnity, fast_convolution, fft
from algebra.euclid import chinese_remainder_algorithm, extended_euclidean_algorithm
from algebra.evaluation import (fast_interpolation, fast_multipoint_evaluation,
                                newton_interpolation)
from algebra.fast import fast_division_with_remainder, inversion_newton_iteration, karatsuba
from algebra.fields import Gaussian, Integer, Rational, finite_field
from algebra.groebner import (buchbergers_algorithm, minimize_groebner_basis,
                              multivariate_division_with_remainder, reduce_groebner_basis)
from algebra.orders import GrLex, PLex
from algebra.polynomials import MultivariatePolynomial
from algebra.univariate import Polynomial

logger = logging.getLogger("demo")


def modular():
    eea = extended_euclidean_algorithm(Integer(12), Integer(29))
    logger.info("EEA of 12 and 29:\n%s", eea.table())
    logger.info("gcd = %r", eea.gcd)
    eea = extended_euclidean_algorithm(Gaussian(7, 8), Gaussian(2, 3))
    logger.info("EEA of 7 + 8i and 2 + 3i:\n%s", eea.table())
    ms = [Integer(5), Integer(7)]
    vs = [Integer(1), Integer(3)]
    logger.info("c = 1 mod 5, c = 3 mod 7: c = %r", chinese_remainder_algorithm(ms, vs))


def multiplication():
    counter = OpCounter()
    C = counting(Rational, counter)
    f = Polynomial([C(c) for c in range(1, 9)])
    g = Polynomial([C(c) for c in range(8, 0, -1)])
    h = karatsuba(3, f, g)
    logger.info("karatsuba: %r", h)
    logger.info("  %d multiplications, %d additions",
                counter.multiplications, counter.additions)
    counter.reset()
    f * g
    logger.info("schoolbook: %d multiplications, %d additions",
                counter.multiplications, counter.additions)

    F17 = finite_field(17)
    root = PrimitiveRootOfUnity(8, F17(2))
    f = Polynomial([F17(c) for c in (3, -4, 3, 5)])
    g = Polynomial([F17(c) for c in (-2, 7, -5, 2)])
    logger.info("DFT of %r at powers of 2 in F17: %r", f, fft(3, f, root))
    logger.info("(%r) * (%r) = %r", f, g, fast_convolution(3, f, g, root))


def newton():
    F7 = finite_field(7)
    f = Polynomial([F7(1), F7(2), F7(3)])
    g = inversion_newton_iteration(f, 4)
    logger.info("1 / (%r) = %r mod x**4", f, g)
    a = Polynomial([Rational(c) for c in (-4, 3, -5, 1)])
    b = Polynomial([Rational(-3), Rational(1)])
    q, r = fast_division_with_remainder(a, b)
    logger.info("(%r) = (%r)(%r) + %r", a, b, q, r)


def evaluation():
    f = Polynomial([Rational(c) for c in range(1, 9)])
    us = [Rational(u) for u in range(-3, 5)]
    logger.info("%r at %r: %r", f, us, fast_multipoint_evaluation(f, us))
    us = [Rational(u) for u in (0, 1, 2, 3)]
    vs = [Rational(v) for v in (1, 2, 4, 8)]
    logger.info("through %r: %r", list(zip(us, vs)), fast_interpolation(us, vs))
    logger.info("newton: %r", newton_interpolation(zip(us, vs)))


def surfaces():
    order = GrLex()
    x, y = MultivariatePolynomial.variables(order, Rational, 2)
    f1 = 2 * x(2) - 4 * x() + y(2) - 4 * y() + 3
    f2 = x(2) - 2 * x() + 3 * y(2) - 12 * y() + 9
    return [f1, f2]


def cycle_n(n):
    order = GrLex()
    xs = [x() for x in MultivariatePolynomial.variables(order, Rational, n)]

    def prod_vars(start, length):
        m = MultivariatePolynomial.one(order, Rational)
        for i in range(length):
            m = m * xs[(start + i) % n]
        return m

    system = []
    for k in range(1, n):
        f = MultivariatePolynomial.zero(order, Rational)
        for i in range(n):
            f = f + prod_vars(i, k)
        system.append(f)
    system.append(prod_vars(0, n) - 1)
    return system


def groebner():
    F5 = finite_field(5)
    order = PLex()
    x, y, z = MultivariatePolynomial.variables(order, F5, 3)
    g1 = x(3) - z()
    g2 = -x() + y()
    division = multivariate_division_with_remainder(g1.s_polynomial(g2), [g1, g2])
    for row in division.rows:
        logger.info("  %r | %r | %r", row.dividend, row.quotients, row.remainder)
    basis = buchbergers_algorithm([g1, g2])
    minimize_groebner_basis(basis)
    logger.info("minimal basis over F5: %r", basis)

    for name, system in [("surfaces", surfaces()), ("cyclic 3", cycle_n(3))]:
        logger.info("Problem (%s):", name)
        for f in system:
            logger.info("  %r", f)
        basis = reduce_groebner_basis(buchbergers_algorithm(system))
        logger.info("Gröbner basis:")
        for g in basis:
            logger.info("  %r", g)


CHAPTERS = {
    "modular": modular,
    "multiplication": multiplication,
    "newton": newton,
    "evaluation": evaluation,
    "groebner": groebner,
}

if __name__ == "__main__":
    setup_logging(os.environ.get("ALGEBRA_LOG", "INFO"))
    for name in sys.argv[1:] or CHAPTERS:
        if name not in CHAPTERS:
            sys.exit(f"unknown chapter {name!r}, pick from {', '.join(CHAPTERS)}")
        logger.info("== %s ==", name)
        CHAPTERS[name]()
