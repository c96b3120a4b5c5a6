"""Tests for the monomial orders."""

import pytest

from algebra.fields import Rational
from algebra.orders import (FunctionOrder, GrLex, OrderMismatchError, PLex, TLex,
                            WeightOrder)
from algebra.polynomials import Monomial, MultivariatePolynomial

# 4xyz^2 + 4x^3 - 5y^4 + 7xy^2z
TERMS = [(4, (1, 1, 2)), (4, (3,)), (-5, (0, 4)), (7, (1, 2, 1))]


class TestOrders:
    @pytest.mark.parametrize("order, expected", [
        (PLex(), [(3,), (1, 2, 1), (1, 1, 2), (0, 4)]),
        (GrLex(), [(1, 2, 1), (1, 1, 2), (0, 4), (3,)]),
        (TLex(), [(0, 4), (1, 2, 1), (1, 1, 2), (3,)]),
    ])
    def test_known_term_orders(self, order, expected):
        p = MultivariatePolynomial.from_terms(order, Rational, TERMS)
        assert [t.powers for t in p.terms] == expected

    def test_plex_compares_first_differing_exponent(self):
        assert PLex()((1,), (0, 5)) > 0
        assert PLex()((0, 1), (0, 2)) < 0
        assert PLex()((1, 0, 0), (1,)) == 0

    def test_plex_permutation(self):
        order = PLex(permutation=(1, 0))
        assert order((1,), (0, 1)) < 0
        assert order((0, 1, 1), (0, 1)) > 0

    def test_partial_permutation_keeps_natural_order_for_the_rest(self):
        order = PLex(permutation=(2,))
        assert order((0, 0, 1), (5, 5)) > 0
        assert order((1,), (0, 1)) > 0

    def test_grlex_sort_key(self):
        vectors = [(0, 1), (2,), (1, 1)]
        assert sorted(vectors, key=GrLex().sort_key()) == [(0, 1), (1, 1), (2,)]

    def test_tlex_prefers_smaller_last_exponent(self):
        assert TLex()((2, 0, 0), (1, 0, 1)) > 0
        assert TLex()((0, 2), (1, 1)) < 0

    def test_weight_order(self):
        order = WeightOrder((1, 2))
        assert order((0, 1), (1,)) > 0
        assert order((2,), (0, 1)) > 0
        assert order((1, 1), (3,)) < 0

    def test_function_order(self):
        order = FunctionOrder(lambda a, b: 10 * (sum(a) - sum(b)))
        assert order((2,), (1,)) == 1
        assert order((1,), (0, 1)) == 0


class TestOrderMismatch:
    def test_monomials(self):
        a = Monomial(PLex(), Rational(1), (1,))
        b = Monomial(GrLex(), Rational(1), (0, 1))
        with pytest.raises(OrderMismatchError):
            a * b
        with pytest.raises(OrderMismatchError):
            a.div(b)

    def test_polynomials(self):
        x = MultivariatePolynomial.variables(PLex(), Rational, 1)[0]
        y = MultivariatePolynomial.variables(GrLex(), Rational, 2)[1]
        with pytest.raises(OrderMismatchError):
            x() + y()

    def test_is_a_value_error(self):
        assert issubclass(OrderMismatchError, ValueError)

    def test_equal_orders_mix(self):
        x = MultivariatePolynomial.variables(PLex(), Rational, 1)[0]
        y = MultivariatePolynomial.variables(PLex(), Rational, 2)[1]
        assert (x() + y()).terms[0].powers == (1,)
