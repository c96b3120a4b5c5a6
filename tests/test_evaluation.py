"""Tests for subproduct trees, multipoint evaluation and interpolation."""

import pytest

from algebra.evaluation import (SamplesNotUniqueError, building_up_the_subproduct_tree,
                                fast_interpolation, fast_multipoint_evaluation,
                                linear_combination_for_linear_moduli, newton_interpolation)
from algebra.fields import Integer, Rational, Real, finite_field
from algebra.univariate import Polynomial


def rationals(*values):
    return [Rational(v) for v in values]


class TestSubproductTree:
    def setup_method(self):
        self.us = rationals(0, 1, 2, 3)
        self.tree = building_up_the_subproduct_tree(self.us)
        self.x = Polynomial.x(Rational)

    def test_levels(self):
        x = self.x
        assert [len(level) for level in self.tree.levels] == [4, 2, 1]
        assert self.tree.levels[0][2] == x - 2
        assert self.tree.levels[1][0] == x * (x - 1)
        assert self.tree.root == x * (x - 1) * (x - 2) * (x - 3)
        assert self.tree.k == 2

    def test_power_of_two_points(self):
        with pytest.raises(AssertionError):
            building_up_the_subproduct_tree(rationals(1, 2, 3))

    def test_single_point(self):
        tree = building_up_the_subproduct_tree(rationals(5))
        assert tree.going_down(self.x * self.x) == [25]

    def test_linear_combination(self):
        x = self.x
        assert linear_combination_for_linear_moduli(rationals(0, 1), rationals(1, 1)) == 2 * x - 1
        m = self.tree.root
        cs = rationals(1, 2, 3, 4)
        expected = Polynomial.zero(Rational)
        for c, u in zip(cs, self.us):
            expected = expected + (m // (x - u)).scale(c)
        assert self.tree.linear_combination(cs) == expected


class TestMultipointEvaluation:
    def test_matches_horner(self):
        f = Polynomial(rationals(*range(1, 9)))
        us = rationals(*range(-3, 5))
        assert fast_multipoint_evaluation(f, us) == [f.evaluate(u) for u in us]

    def test_over_a_prime_field(self):
        F13 = finite_field(13)
        f = Polynomial([F13(c) for c in (4, 0, 7, 1, 12)])
        us = [F13(u) for u in (1, 5, 8, 11)]
        assert fast_multipoint_evaluation(f, us) == [f.evaluate(u) for u in us]


class TestInterpolation:
    def setup_method(self):
        self.us = rationals(0, 1, 2, 3)
        self.vs = rationals(1, 2, 4, 8)
        self.expected = Polynomial([Rational(1), Rational(5, 6), Rational(0), Rational(1, 6)])

    def test_fast_interpolation(self):
        f = fast_interpolation(self.us, self.vs)
        assert f == self.expected
        assert [f.evaluate(u) for u in self.us] == self.vs

    def test_newton_interpolation(self):
        f = newton_interpolation(zip(self.us, self.vs))
        assert f == self.expected

    def test_newton_accepts_plain_ints(self):
        f = newton_interpolation([(Rational(0), 1), (1, 2), (2, 4), (3, 8)])
        assert f == self.expected

    def test_plain_int_points_default_to_rationals(self):
        f = newton_interpolation([(0, 1), (1, 2), (2, 4), (3, 8)])
        assert f == self.expected
        assert f.field is Rational
        g = fast_interpolation([0, 1, 2, 3], [1, 2, 4, 8])
        assert g == self.expected
        tree = building_up_the_subproduct_tree([Integer(0), Integer(1)])
        assert tree.root.field is Rational

    def test_explicit_field(self):
        F7 = finite_field(7)
        f = newton_interpolation([(0, 1), (1, 2), (2, 4), (3, 8)], field=F7)
        assert f.field is F7
        assert [f.evaluate(F7(u)) for u in range(4)] == [1, 2, 4, 1]
        assert fast_interpolation([0, 1, 2, 3], [1, 2, 4, 8], field=F7) == f

    def test_real_samples(self):
        us = [Real(u) for u in (0.5, 1.5, 2.5, 3.5)]
        f = Polynomial([Real(2), Real(-1), Real(0.5)])
        vs = [f.evaluate(u) for u in us]
        assert fast_interpolation(us, vs) == f
        assert newton_interpolation(zip(us, vs)) == f

    def test_duplicate_samples(self):
        with pytest.raises(SamplesNotUniqueError):
            newton_interpolation([(Rational(1), 1), (Rational(2), 3), (Rational(1), 5)])
        assert issubclass(SamplesNotUniqueError, ValueError)

    def test_no_samples(self):
        with pytest.raises(ValueError):
            newton_interpolation([])
