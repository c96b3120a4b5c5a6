from itertools import product

from .orders import pad
from .structures import Ring, binary_operation

NAMES = "xyzvw"


def variable_name(index):
    return NAMES[index] if index < len(NAMES) else f"x{index}"


def strip(powers):
    powers = tuple(powers)
    end = len(powers)
    while end and powers[end - 1] == 0:
        end -= 1
    return powers[:end]


class Monomial:
    """A term coef * x0**p0 * x1**p1 * ... under a monomial order.

    Trailing zero exponents are dropped, so (1, 0) and (1,) are the same
    power vector. The comparisons <, <=, > and >= look only at the power
    vectors under the order, while == also compares coefficients.
    """
    __slots__ = ("order", "coef", "powers")

    def __init__(self, order, coef, powers=()):
        self.order = order
        self.coef = coef
        self.powers = strip(powers)
        assert all(p >= 0 for p in self.powers), self.powers

    @classmethod
    def zero(cls, order, field):
        return cls(order, field.zero())

    @property
    def degree(self):
        return sum(self.powers)

    def is_zero(self):
        return self.coef.is_zero()

    def without_coef(self):
        return Monomial(self.order, self.coef.one_like(), self.powers)

    def __hash__(self):
        return hash(self.powers)

    def __eq__(self, other):
        if not isinstance(other, Monomial):
            return NotImplemented
        return self.powers == other.powers and self.coef == other.coef

    def compare(self, other):
        self.order.check(other.order)
        return self.order.compare(self.powers, other.powers)

    def __lt__(self, other):
        return self.compare(other) < 0

    def __le__(self, other):
        return self.compare(other) <= 0

    def __gt__(self, other):
        return self.compare(other) > 0

    def __ge__(self, other):
        return self.compare(other) >= 0

    def __mul__(self, other):
        if isinstance(other, Monomial):
            self.order.check(other.order)
            powers = (a + b for a, b in pad(self.powers, other.powers))
            return Monomial(self.order, self.coef * other.coef, powers)
        if isinstance(other, MultivariatePolynomial):
            return NotImplemented
        return Monomial(self.order, self.coef * other, self.powers)

    def __rmul__(self, other):
        return Monomial(self.order, other * self.coef, self.powers)

    def __truediv__(self, other):
        return Monomial(self.order, self.coef / other, self.powers)

    def __neg__(self):
        return Monomial(self.order, -self.coef, self.powers)

    def divides(self, other):
        return all(a <= b for a, b in pad(self.powers, other.powers))

    def div(self, other):
        """self / other, or None when other's powers do not divide self's."""
        self.order.check(other.order)
        powers = []
        for a, b in pad(self.powers, other.powers):
            if b > a:
                return None
            powers.append(a - b)
        return Monomial(self.order, self.coef / other.coef, powers)

    def lcm(self, other):
        powers = (max(a, b) for a, b in pad(self.powers, other.powers))
        return Monomial(self.order, self.coef.one_like(), powers)

    def pretty(self):
        return "*".join(f"{variable_name(i)}**{e}" if e > 1 else variable_name(i)
                        for i, e in enumerate(self.powers) if e > 0)

    def __repr__(self):
        if self.is_zero():
            return "0"
        names = self.pretty()
        if not names:
            return repr(self.coef)
        if self.coef.is_one():
            return names
        if (-self.coef).is_one():
            return f"-{names}"
        return f"{self.coef!r}*{names}"


class MultivariatePolynomial(Ring):
    """A sparse polynomial over `field`, kept normalized under `order`.

    `terms` holds at most one monomial per power vector, none with a zero
    coefficient, sorted from greatest to least. Every constructor and every
    arithmetic result goes through this normalization.
    """
    __slots__ = ("order", "field", "terms")

    def __init__(self, order, terms=(), field=None):
        terms = list(terms)
        if field is None:
            if not terms:
                raise ValueError("the field of an empty polynomial must be given")
            field = type(terms[0].coef)
        sums = {}
        for term in terms:
            order.check(term.order)
            coef = field.coerce(term.coef)
            sums[term.powers] = sums[term.powers] + coef if term.powers in sums else coef
        self.order = order
        self.field = field
        self.terms = sorted((Monomial(order, coef, powers)
                             for powers, coef in sums.items() if not coef.is_zero()),
                            reverse=True)

    @classmethod
    def from_terms(cls, order, field, terms):
        """Build from (coefficient, power vector) pairs."""
        return cls(order, [Monomial(order, field.coerce(c), p) for c, p in terms], field)

    @classmethod
    def zero(cls, order, field):
        return cls(order, (), field)

    @classmethod
    def one(cls, order, field):
        return cls.constant(order, field, field.one())

    @classmethod
    def constant(cls, order, field, c):
        return cls(order, [Monomial(order, field.coerce(c))], field)

    @classmethod
    def variables(cls, order, field, n):
        """`n` functions, the i-th mapping e to x_i**e with coefficient one."""
        def variable(i):
            def power(e=1):
                return cls(order, [Monomial(order, field.one(), (0,) * i + (e,))], field)
            return power
        return [variable(i) for i in range(n)]

    def zero_like(self):
        return MultivariatePolynomial.zero(self.order, self.field)

    def one_like(self):
        return MultivariatePolynomial.one(self.order, self.field)

    def coerce(self, value):
        if isinstance(value, MultivariatePolynomial):
            self.order.check(value.order)
            return value
        if isinstance(value, Monomial):
            return MultivariatePolynomial(self.order, [value], self.field)
        return MultivariatePolynomial.constant(self.order, self.field, value)

    def is_zero(self):
        return not self.terms

    def __bool__(self):
        return bool(self.terms)

    def leading_term(self):
        if not self.terms:
            return Monomial.zero(self.order, self.field)
        return max(self.terms)

    def leading_coef(self):
        return self.leading_term().coef

    def leading_monomial(self):
        return self.leading_term().without_coef()

    @property
    def total_degree(self):
        return max((t.degree for t in self.terms), default=-1)

    @binary_operation
    def __add__(self, other):
        return MultivariatePolynomial(self.order, self.terms + other.terms, self.field)

    def __neg__(self):
        return MultivariatePolynomial(self.order, [-t for t in self.terms], self.field)

    @binary_operation
    def __sub__(self, other):
        return MultivariatePolynomial(self.order, self.terms + [-t for t in other.terms],
                                      self.field)

    @binary_operation
    def __mul__(self, other):
        terms = [a * b for a, b in product(self.terms, other.terms)]
        return MultivariatePolynomial(self.order, terms, self.field)

    def mul_monomial(self, m):
        return MultivariatePolynomial(self.order, [t * m for t in self.terms], self.field)

    def multiplicative_inverse(self):
        if self.total_degree != 0:
            return None
        inverse = self.leading_coef().multiplicative_inverse()
        if inverse is None:
            return None
        return MultivariatePolynomial.constant(self.order, self.field, inverse)

    def __eq__(self, other):
        try:
            other = self.coerce(other)
        except TypeError:
            return NotImplemented
        return self.terms == other.terms

    def __hash__(self):
        return hash(tuple(self.terms))

    def minimize(self):
        """The same polynomial scaled to leading coefficient one."""
        if not self.terms:
            return self
        lc = self.leading_coef()
        return MultivariatePolynomial(self.order, [t / lc for t in self.terms], self.field)

    def s_polynomial(self, other):
        """lcm/lt(f) * f - lcm/lt(g) * g, cancelling both leading terms."""
        self.order.check(other.order)
        lt_f = self.leading_term()
        lt_g = other.leading_term()
        lcm = lt_f.lcm(lt_g)
        l = lcm.div(lt_f)
        r = lcm.div(lt_g)
        assert l is not None, f"{lcm}/{lt_f} failed"
        assert r is not None, f"{lcm}/{lt_g} failed"
        return self.mul_monomial(l) - other.mul_monomial(r)

    def div_mono(self, m):
        """Every term divided by `m`, or None if one of them is not divisible."""
        terms = []
        for t in self.terms:
            q = t.div(m)
            if q is None:
                return None
            terms.append(q)
        return MultivariatePolynomial(self.order, terms, self.field)

    def evaluate(self, point):
        point = [self.field.coerce(v) for v in point]
        result = self.field.zero()
        for t in self.terms:
            value = t.coef
            for v, e in zip(point, t.powers):
                value = value * v.pow(e)
            result = result + value
        return result

    def __repr__(self):
        if not self.terms:
            return "0"
        return " + ".join(repr(t) for t in self.terms)
