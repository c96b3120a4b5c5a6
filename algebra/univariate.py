"""Dense univariate polynomials over a ring."""
from typing import Optional, Tuple

from .structures import EuclideanDomain, binary_operation


class Polynomial(EuclideanDomain):
    """Coefficients lowest degree first: 3x^2 + 2x + 1 is Polynomial([1, 2, 3]).

    Trailing zeros are stripped, so the zero polynomial has no coefficients
    and degree -1. The coefficient type is taken from the first coefficient
    unless `field` is given; plain ints are coerced into it.
    """
    __slots__ = ("field", "coefficients")

    def __init__(self, coefficients=(), field=None):
        coefficients = list(coefficients)
        if field is None:
            if not coefficients:
                raise ValueError("the field of an empty polynomial must be given")
            field = type(coefficients[0])
        coefficients = [field.coerce(c) for c in coefficients]
        while coefficients and coefficients[-1].is_zero():
            coefficients.pop()
        self.field = field
        self.coefficients = tuple(coefficients)

    @classmethod
    def zero(cls, field):
        return cls((), field)

    @classmethod
    def one(cls, field):
        return cls([field.one()], field)

    @classmethod
    def constant(cls, field, c):
        return cls([c], field)

    @classmethod
    def x(cls, field):
        return cls([field.zero(), field.one()], field)

    def zero_like(self):
        return Polynomial.zero(self.field)

    def one_like(self):
        return Polynomial.one(self.field)

    def coerce(self, value):
        if isinstance(value, Polynomial):
            return value
        return Polynomial.constant(self.field, value)

    @property
    def degree(self):
        return len(self.coefficients) - 1

    def is_zero(self):
        return not self.coefficients

    def __bool__(self):
        return bool(self.coefficients)

    def __len__(self):
        return len(self.coefficients)

    def lc(self):
        if not self.coefficients:
            return self.field.zero()
        return self.coefficients[-1]

    def coef_at(self, i):
        if 0 <= i < len(self.coefficients):
            return self.coefficients[i]
        return self.field.zero()

    def is_monic(self):
        return self.lc().is_one()

    def evaluate(self, x):
        x = self.field.coerce(x)
        acc = self.field.zero()
        for c in reversed(self.coefficients):
            acc = acc * x + c
        return acc

    def derivative(self):
        return Polynomial([c * i for i, c in enumerate(self.coefficients) if i > 0],
                          self.field)

    def shift(self, k):
        """self * x**k"""
        if not self.coefficients:
            return self
        return Polynomial([self.field.zero()] * k + list(self.coefficients), self.field)

    def truncate(self, k):
        """self mod x**k"""
        return Polynomial(self.coefficients[:k], self.field)

    def reversal(self, k):
        """x**k * self(1/x), for k at least the degree."""
        assert k >= self.degree, (k, self.degree)
        padded = list(self.coefficients) + [self.field.zero()] * (k + 1 - len(self.coefficients))
        return Polynomial(reversed(padded), self.field)

    def scale(self, s):
        return Polynomial([c * s for c in self.coefficients], self.field)

    @binary_operation
    def __add__(self, other):
        a, b = self.coefficients, other.coefficients
        if len(a) < len(b):
            a, b = b, a
        return Polynomial([x + y for x, y in zip(a, b)] + list(a[len(b):]), self.field)

    def __neg__(self):
        return Polynomial([-c for c in self.coefficients], self.field)

    @binary_operation
    def __sub__(self, other):
        return self + (-other)

    @binary_operation
    def __mul__(self, other):
        if not self or not other:
            return self.zero_like()
        out = [self.field.zero()] * (len(self) + len(other) - 1)
        for i, a in enumerate(self.coefficients):
            for j, b in enumerate(other.coefficients):
                out[i + j] = out[i + j] + a * b
        return Polynomial(out, self.field)

    def multiplicative_inverse(self):
        if self.degree != 0:
            return None
        inverse = self.lc().multiplicative_inverse()
        if inverse is None:
            return None
        return Polynomial.constant(self.field, inverse)

    def div_rem(self, other) -> Optional[Tuple["Polynomial", "Polynomial"]]:
        """Quotient and remainder, or None if lc(other) is not a unit."""
        u = other.lc().multiplicative_inverse()
        if u is None:
            return None
        n, m = self.degree, other.degree
        if n < m:
            return self.zero_like(), self
        r = list(self.coefficients)
        q = [self.field.zero()] * (n - m + 1)
        for i in range(n - m, -1, -1):
            c = r[m + i] * u
            q[i] = c
            if not c.is_zero():
                for j, b in enumerate(other.coefficients):
                    r[i + j] = r[i + j] - c * b
        return Polynomial(q, self.field), Polynomial(r[:m], self.field)

    @binary_operation
    def __divmod__(self, other):
        result = self.div_rem(other)
        if result is None:
            raise ZeroDivisionError(f"{other!r} has no invertible leading coefficient")
        return result

    def d(self):
        return None if self.is_zero() else self.degree

    def __eq__(self, other):
        try:
            other = self.coerce(other)
        except TypeError:
            return NotImplemented
        return self.coefficients == other.coefficients

    def __hash__(self):
        return hash(self.coefficients)

    def __repr__(self):
        if not self.coefficients:
            return "0"
        terms = []
        for i, c in reversed(list(enumerate(self.coefficients))):
            if c.is_zero():
                continue
            if i == 0:
                terms.append(repr(c))
            elif i == 1:
                terms.append(f"{c!r}*x")
            else:
                terms.append(f"{c!r}*x**{i}")
        return " + ".join(terms)
