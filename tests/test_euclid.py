"""Tests for the extended Euclidean and Chinese remainder algorithms."""

import pytest

from algebra.euclid import (chinese_remainder_algorithm, extended_euclidean_algorithm,
                            gcd_divides_inputs)
from algebra.fields import Gaussian, Integer, Rational
from algebra.univariate import Polynomial


class TestExtendedEuclideanAlgorithm:
    def test_12_and_29(self):
        eea = extended_euclidean_algorithm(Integer(12), Integer(29))
        assert eea.r == [12, 29, 12, 5, 2, 1, 0]
        assert eea.gcd == 1
        assert eea.s[-2] * 12 + eea.t[-2] * 29 == 1

    @pytest.mark.parametrize("f, g", [(12, 29), (240, 46), (7, 7), (18, 12)])
    def test_every_row_is_a_combination(self, f, g):
        eea = extended_euclidean_algorithm(Integer(f), Integer(g))
        for r, s, t in zip(eea.r, eea.s, eea.t):
            assert r == s * f + t * g
        assert len(eea.q) == len(eea.r) - 1

    def test_polynomials(self):
        x = Polynomial.x(Rational)
        f = x * x - 1
        g = x - 1
        eea = extended_euclidean_algorithm(f, g)
        assert eea.gcd == g
        assert eea.q[1] == x + 1

    def test_gaussian_integers(self):
        f, g = Gaussian(7, 8), Gaussian(2, 3)
        eea = extended_euclidean_algorithm(f, g)
        assert eea.r == [f, g, Gaussian(1, -1), Gaussian(-1, 0), 0]
        for r, s, t in zip(eea.r, eea.s, eea.t):
            assert r == s * f + t * g
        assert eea.gcd.multiplicative_inverse() is not None

    def test_table_lists_every_row(self):
        eea = extended_euclidean_algorithm(Integer(12), Integer(29))
        lines = eea.table().splitlines()
        assert len(lines) == len(eea.r) + 2
        assert lines[0].split() == ["i", "q", "r", "s", "t"]
        assert set(lines[1].replace(" ", "")) == {"-"}
        assert lines[2].split() == ["0", "0", "12", "1", "0"]
        assert lines[-1].split() == ["6", "0", "29", "-12"]

    def test_table_over_polynomials(self):
        x = Polynomial.x(Rational)
        table = extended_euclidean_algorithm(x * x - 1, x - 1).table()
        assert "1*x + 1" in table
        assert "1*x**2 + -1" in table

    def test_gcd_divides_inputs(self):
        assert gcd_divides_inputs(Integer(12), Integer(18))
        x = Polynomial.x(Rational)
        assert gcd_divides_inputs(x * x * x - x, x * x + x)


class TestChineseRemainder:
    def test_two_moduli(self):
        ms = [Integer(5), Integer(7)]
        vs = [Integer(1), Integer(3)]
        assert chinese_remainder_algorithm(ms, vs) == 31

    def test_three_moduli(self):
        ms = [Integer(3), Integer(4), Integer(5)]
        vs = [Integer(2), Integer(3), Integer(1)]
        c = chinese_remainder_algorithm(ms, vs)
        assert c == 11
        for m, v in zip(ms, vs):
            assert c % m == v

    def test_result_is_not_negative(self):
        ms = [Integer(4), Integer(9)]
        vs = [Integer(-1), Integer(-2)]
        assert chinese_remainder_algorithm(ms, vs) == 7
