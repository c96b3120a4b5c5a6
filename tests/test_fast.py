"""Tests for Karatsuba, Newton inversion and fast division."""

import pytest

from algebra.counting import OpCounter, counting
from algebra.fast import fast_division_with_remainder, inversion_newton_iteration, karatsuba
from algebra.fields import Integer, Rational, finite_field
from algebra.univariate import Polynomial


def poly(*coefs, field=Rational):
    return Polynomial([field.coerce(c) for c in coefs], field)


class TestKaratsuba:
    def test_matches_schoolbook(self):
        f = poly(*range(1, 9))
        g = poly(*range(8, 0, -1))
        assert karatsuba(3, f, g) == f * g

    @pytest.mark.parametrize("k", [0, 1, 2, 3])
    def test_multiplication_count(self, k):
        counter = OpCounter()
        C = counting(Rational, counter)
        n = 2 ** k
        f = Polynomial([C(c + 1) for c in range(n)])
        g = Polynomial([C(2 * c + 3) for c in range(n)])
        expected = f * g
        counter.reset()
        assert karatsuba(k, f, g) == expected
        assert counter.multiplications <= 3 ** k

    def test_uneven_degrees(self):
        f = poly(1, 2, 3)
        g = poly(5)
        assert karatsuba(2, f, g) == f * g
        assert karatsuba(2, f, Polynomial.zero(Rational)).is_zero()

    def test_over_integers(self):
        f = poly(1, -1, 2, field=Integer)
        g = poly(3, 0, 0, 1, field=Integer)
        assert karatsuba(2, f, g) == f * g

    def test_degree_bound(self):
        with pytest.raises(AssertionError):
            karatsuba(1, poly(1, 1, 1), poly(1))


class TestNewtonInversion:
    def test_series_inverse_over_f7(self):
        F7 = finite_field(7)
        f = poly(1, 2, 3, field=F7)
        g = inversion_newton_iteration(f, 4)
        assert g == poly(1, -2, 1, 4, field=F7)
        assert (f * g).truncate(4).is_one()

    @pytest.mark.parametrize("l", [1, 2, 3, 5, 8, 13])
    def test_precision(self, l):
        f = poly(1, -3, Rational(1, 2), 7)
        g = inversion_newton_iteration(f, l)
        assert (f * g).truncate(l) == 1
        assert g.degree < l

    def test_requires_constant_term_one(self):
        with pytest.raises(AssertionError):
            inversion_newton_iteration(poly(2, 1), 3)


class TestFastDivision:
    def test_example(self):
        a = poly(-4, 3, -5, 1)
        b = poly(-3, 1)
        q, r = fast_division_with_remainder(a, b)
        assert q == poly(-3, -2, 1)
        assert r == -13

    def test_agrees_with_div_rem(self):
        F17 = finite_field(17)
        a = poly(3, 1, 4, 1, 5, 9, 2, 6, field=F17)
        b = poly(2, 7, 1, 1, field=F17)
        assert fast_division_with_remainder(a, b) == a.div_rem(b)

    def test_smaller_dividend(self):
        a = poly(1, 2)
        q, r = fast_division_with_remainder(a, poly(0, 0, 1))
        assert q.is_zero()
        assert r == a

    def test_requires_monic_divisor(self):
        with pytest.raises(AssertionError):
            fast_division_with_remainder(poly(1, 2, 3), poly(1, 2))
        with pytest.raises(AssertionError):
            fast_division_with_remainder(poly(1, 2, 3), Polynomial.zero(Rational))
