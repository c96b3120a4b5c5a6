"""Coefficient wrapper that counts ring operations.

The counter is owned by the caller and bound to a wrapper type with
`counting`, so nothing here is global:

    counter = OpCounter()
    C = counting(Rational, counter)
    karatsuba(3, Polynomial([C(1), C(2)]), ...)
    counter.multiplications
"""
from dataclasses import dataclass

from .structures import Field, binary_operation


@dataclass
class OpCounter:
    additions: int = 0
    multiplications: int = 0

    def reset(self):
        self.additions = 0
        self.multiplications = 0


class CountOps(Field):
    """A value of `inner` whose additions and multiplications are tallied.

    Subtraction counts as an addition and division as a multiplication.
    """
    __slots__ = ("value",)
    inner = None
    counter = None

    def __init__(self, value=0):
        if isinstance(value, CountOps):
            value = value.value
        self.value = self.inner.coerce(value)

    @classmethod
    def coerce(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(cls.inner.coerce(value))
        except TypeError:
            return super().coerce(value)

    @classmethod
    def zero(cls):
        return cls(cls.inner.zero())

    @classmethod
    def one(cls):
        return cls(cls.inner.one())

    @binary_operation
    def __add__(self, other):
        self.counter.additions += 1
        return type(self)(self.value + other.value)

    @binary_operation
    def __sub__(self, other):
        self.counter.additions += 1
        return type(self)(self.value - other.value)

    def __neg__(self):
        return type(self)(-self.value)

    @binary_operation
    def __mul__(self, other):
        self.counter.multiplications += 1
        return type(self)(self.value * other.value)

    @binary_operation
    def __truediv__(self, other):
        self.counter.multiplications += 1
        return type(self)(self.value / other.value)

    def multiplicative_inverse(self):
        inverse = self.value.multiplicative_inverse()
        if inverse is None:
            return None
        return type(self)(inverse)

    def __eq__(self, other):
        try:
            other = self.coerce(other)
        except TypeError:
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return repr(self.value)


def counting(inner, counter):
    """A `CountOps` type over the coefficient type `inner` tallying into `counter`."""
    name = f"Counting{inner.__name__}"
    return type(name, (CountOps,), {"__slots__": (), "inner": inner, "counter": counter})
