"""The numeric tower: integers, Gaussian integers, rationals, prime fields
and floating point.

Plain Python numbers mixed into the arithmetic are coerced, so
`Integer(3) + 1` and `2 * F5(3)` both work.
"""
from fractions import Fraction
from functools import lru_cache, total_ordering
import numpy as np

from .config import config
from .structures import EuclideanDomain, Field, binary_operation


@total_ordering
class Integer(EuclideanDomain):
    __slots__ = ("value",)

    def __init__(self, value=0):
        if isinstance(value, Integer):
            value = value.value
        self.value = int(value)

    @classmethod
    def coerce(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        return super().coerce(value)

    @classmethod
    def zero(cls):
        return cls(0)

    @classmethod
    def one(cls):
        return cls(1)

    @binary_operation
    def __add__(self, other):
        return Integer(self.value + other.value)

    def __neg__(self):
        return Integer(-self.value)

    @binary_operation
    def __mul__(self, other):
        return Integer(self.value * other.value)

    def multiplicative_inverse(self):
        if self.value in (1, -1):
            return self
        return None

    def pow(self, n):
        return Integer(self.value ** n)

    @binary_operation
    def __divmod__(self, other):
        q, r = divmod(self.value, other.value)
        return Integer(q), Integer(r)

    def d(self):
        return abs(self.value)

    def __eq__(self, other):
        try:
            other = self.coerce(other)
        except TypeError:
            return NotImplemented
        return self.value == other.value

    @binary_operation
    def __lt__(self, other):
        return self.value < other.value

    def __hash__(self):
        return hash(self.value)

    def __int__(self):
        return self.value

    def __repr__(self):
        return str(self.value)


class Gaussian(EuclideanDomain):
    """The Gaussian integer real + imag*i.

    Division rounds the exact quotient to the nearest Gaussian integer, so
    the remainder has at most half the norm of the divisor.
    """
    __slots__ = ("real", "imag")

    def __init__(self, real=0, imag=0):
        if isinstance(real, Gaussian):
            real, imag = real.real, real.imag
        self.real = int(real)
        self.imag = int(imag)

    @classmethod
    def coerce(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, (int, Integer)):
            return cls(value)
        return super().coerce(value)

    @classmethod
    def zero(cls):
        return cls(0)

    @classmethod
    def one(cls):
        return cls(1)

    def conj(self):
        return Gaussian(self.real, -self.imag)

    def norm(self):
        return self.real * self.real + self.imag * self.imag

    @binary_operation
    def __add__(self, other):
        return Gaussian(self.real + other.real, self.imag + other.imag)

    def __neg__(self):
        return Gaussian(-self.real, -self.imag)

    @binary_operation
    def __mul__(self, other):
        return Gaussian(self.real * other.real - self.imag * other.imag,
                        self.real * other.imag + self.imag * other.real)

    def multiplicative_inverse(self):
        # the units 1, -1, i, -i are exactly the elements of norm one
        if self.norm() == 1:
            return self.conj()
        return None

    @binary_operation
    def __divmod__(self, other):
        n = other.norm()
        if n == 0:
            raise ZeroDivisionError(f"division of {self!r} by zero")
        numerator = self * other.conj()
        q = Gaussian((2 * numerator.real + n) // (2 * n),
                     (2 * numerator.imag + n) // (2 * n))
        return q, self - q * other

    def d(self):
        return self.norm()

    def __eq__(self, other):
        try:
            other = self.coerce(other)
        except TypeError:
            return NotImplemented
        return self.real == other.real and self.imag == other.imag

    def __hash__(self):
        return hash((self.real, self.imag))

    def __repr__(self):
        if self.imag < 0:
            return f"{self.real} - {-self.imag}i"
        return f"{self.real} + {self.imag}i"


@total_ordering
class Rational(Field):
    __slots__ = ("value",)

    def __init__(self, numerator=0, denominator=1):
        if isinstance(numerator, (Integer, Rational)):
            numerator = numerator.value
        self.value = Fraction(numerator, denominator)

    @classmethod
    def coerce(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, (int, Fraction, Integer)):
            return cls(value)
        return super().coerce(value)

    @classmethod
    def zero(cls):
        return cls(0)

    @classmethod
    def one(cls):
        return cls(1)

    @property
    def numerator(self):
        return self.value.numerator

    @property
    def denominator(self):
        return self.value.denominator

    @binary_operation
    def __add__(self, other):
        return Rational(self.value + other.value)

    def __neg__(self):
        return Rational(-self.value)

    @binary_operation
    def __mul__(self, other):
        return Rational(self.value * other.value)

    def multiplicative_inverse(self):
        if self.value == 0:
            return None
        return Rational(1 / self.value)

    def pow(self, n):
        return Rational(self.value ** n)

    def __eq__(self, other):
        try:
            other = self.coerce(other)
        except TypeError:
            return NotImplemented
        return self.value == other.value

    @binary_operation
    def __lt__(self, other):
        return self.value < other.value

    def __hash__(self):
        return hash(self.value)

    def __float__(self):
        return float(self.value)

    def __repr__(self):
        return str(self.value)


class Finite(Field):
    """Integers modulo a prime. Concrete fields come from `finite_field`."""
    __slots__ = ("value",)
    modulus = None

    def __init__(self, value=0):
        if isinstance(value, (Finite, Integer)):
            value = value.value
        if isinstance(value, Fraction):
            value = value.numerator * pow(value.denominator, -1, self.modulus)
        self.value = int(value) % self.modulus

    @classmethod
    def coerce(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, (int, Integer)):
            return cls(value)
        return super().coerce(value)

    @classmethod
    def zero(cls):
        return cls(0)

    @classmethod
    def one(cls):
        return cls(1)

    @binary_operation
    def __add__(self, other):
        return type(self)(self.value + other.value)

    def __neg__(self):
        return type(self)(-self.value)

    @binary_operation
    def __mul__(self, other):
        return type(self)(self.value * other.value)

    def multiplicative_inverse(self):
        try:
            return type(self)(pow(self.value, -1, self.modulus))
        except ValueError:
            return None

    def pow(self, n):
        return type(self)(pow(self.value, n, self.modulus))

    def __eq__(self, other):
        try:
            other = self.coerce(other)
        except TypeError:
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash((self.modulus, self.value))

    def __int__(self):
        return self.value

    def __repr__(self):
        return str(self.value)


def is_prime(n):
    if n < 2:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True


@lru_cache(maxsize=None)
def finite_field(p):
    """The field of integers modulo the prime `p`, as a `Finite` subclass."""
    assert is_prime(p), f"{p} is not a prime"
    return type(f"F{p}", (Finite,), {"__slots__": (), "modulus": p})


class Approximate(Field):
    """Floating point field with equality up to `config` tolerances."""
    __slots__ = ("value",)
    dtype = None
    accepts = ()

    def __init__(self, value=0):
        if isinstance(value, Approximate):
            value = value.value
        elif isinstance(value, (Integer, Rational, Finite)):
            value = value.value
        if isinstance(value, Fraction):
            value = float(value)
        self.value = self.dtype(value)

    @classmethod
    def coerce(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, cls.accepts):
            return cls(value)
        return super().coerce(value)

    @classmethod
    def zero(cls):
        return cls(0)

    @classmethod
    def one(cls):
        return cls(1)

    @binary_operation
    def __add__(self, other):
        return type(self)(self.value + other.value)

    def __neg__(self):
        return type(self)(-self.value)

    @binary_operation
    def __mul__(self, other):
        return type(self)(self.value * other.value)

    def multiplicative_inverse(self):
        if self.is_zero():
            return None
        return type(self)(1 / self.value)

    def __eq__(self, other):
        try:
            other = self.coerce(other)
        except TypeError:
            return NotImplemented
        return bool(np.isclose(self.value, other.value,
                               rtol=config.real_rtol, atol=config.real_atol))

    __hash__ = None

    def __repr__(self):
        return repr(self.value.item())


@total_ordering
class Real(Approximate):
    __slots__ = ()
    dtype = np.float64
    accepts = (int, float, Fraction, Integer, Rational)

    @binary_operation
    def __lt__(self, other):
        return self != other and self.value < other.value

    def __float__(self):
        return float(self.value)


class Complex(Approximate):
    __slots__ = ()
    dtype = np.complex128
    accepts = (int, float, complex, Fraction, Integer, Rational, Real)

    @classmethod
    def root_of_unity(cls, n, sign=-1):
        """exp(sign * 2πi / n), the root `numpy.fft` uses for sign = -1."""
        return cls(np.exp(sign * 2j * np.pi / n))

    def __complex__(self):
        return complex(self.value)
