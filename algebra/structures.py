"""Algebraic structure contracts.

Coefficient types used by the polynomial code subclass one of these. The
identities are classmethods (`F.zero()`, `F.one()`), with instance level
`zero_like()` / `one_like()` for structures whose identities depend on a
parameter, such as polynomials over a given field.
"""
from abc import ABC, abstractmethod
from functools import wraps
from typing import Optional


def binary_operation(method):
    """Coerce the right operand, deferring to the other type if that fails."""
    @wraps(method)
    def wrapper(self, other):
        try:
            other = self.coerce(other)
        except TypeError:
            return NotImplemented
        return method(self, other)
    return wrapper


class Group(ABC):
    __slots__ = ()

    @classmethod
    @abstractmethod
    def zero(cls):
        """The identity element for addition."""

    @classmethod
    def coerce(cls, value):
        if isinstance(value, cls):
            return value
        raise TypeError(f"cannot use {type(value).__name__} as {cls.__name__}")

    def zero_like(self):
        return type(self).zero()

    def is_zero(self):
        return self == self.zero_like()

    @abstractmethod
    def __add__(self, other): ...

    @abstractmethod
    def __neg__(self): ...

    @binary_operation
    def __sub__(self, other):
        return self + (-other)

    @binary_operation
    def __radd__(self, other):
        return other + self

    @binary_operation
    def __rsub__(self, other):
        return other - self


class Ring(Group):
    """Associative multiplication distributing over addition, with a one."""
    __slots__ = ()

    @classmethod
    @abstractmethod
    def one(cls):
        """The identity element for multiplication."""

    @classmethod
    def from_natural(cls, n):
        """`n` as the sum of `n` copies of one."""
        result = cls.zero()
        for _ in range(n):
            result = result + cls.one()
        return result

    def one_like(self):
        return type(self).one()

    def is_one(self):
        return self == self.one_like()

    @abstractmethod
    def __mul__(self, other): ...

    @binary_operation
    def __rmul__(self, other):
        return other * self

    @abstractmethod
    def multiplicative_inverse(self) -> Optional["Ring"]:
        """The inverse if `self` is a unit, otherwise None."""

    def pow(self, n):
        result = self.one_like()
        for _ in range(n):
            result = result * self
        return result

    def __pow__(self, n):
        if n < 0:
            inverse = self.multiplicative_inverse()
            if inverse is None:
                raise ZeroDivisionError(f"{self!r} is not a unit")
            return inverse.pow(-n)
        return self.pow(n)


class EuclideanDomain(Ring):
    """A domain with division with remainder.

    `d` is the size function: for `b != 0`, `a % b` is zero or strictly
    smaller than `b` under `d`.
    """
    __slots__ = ()

    @abstractmethod
    def __divmod__(self, other): ...

    def __floordiv__(self, other):
        return divmod(self, other)[0]

    def __mod__(self, other):
        return divmod(self, other)[1]

    @abstractmethod
    def d(self) -> Optional[int]: ...


class Field(EuclideanDomain):
    """Every nonzero element is a unit.

    A field is a Euclidean domain in the trivial way: division is exact and
    every remainder is zero.
    """
    __slots__ = ()

    @binary_operation
    def __truediv__(self, other):
        inverse = other.multiplicative_inverse()
        if inverse is None:
            raise ZeroDivisionError(f"division of {self!r} by zero")
        return self * inverse

    @binary_operation
    def __rtruediv__(self, other):
        return other / self

    @binary_operation
    def __divmod__(self, other):
        return self / other, self.zero_like()

    def d(self):
        return None if self.is_zero() else 0
