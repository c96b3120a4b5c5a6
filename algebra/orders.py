"""Monomial orders.

An order compares two power vectors (tuples of exponents, index = variable)
and returns a negative number, zero or a positive number. Positive means the
left vector is greater; the leading term of a polynomial is its greatest
term. Vectors may differ in length, missing entries are zero.

Every order used for division or Gröbner bases must be total and compatible
with multiplication: a <= b implies a*c <= b*c.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import cmp_to_key
from itertools import zip_longest
from typing import Callable, Optional, Tuple


class OrderMismatchError(ValueError):
    pass


def sign(x):
    return (x > 0) - (x < 0)


def exponent(powers, index):
    return powers[index] if index < len(powers) else 0


def variable_indices(permutation, a, b):
    n = max(len(a), len(b))
    if permutation is None:
        return range(n)
    rest = [i for i in range(n) if i not in permutation]
    return tuple(permutation) + tuple(rest)


def plex(permutation, a, b):
    for i in variable_indices(permutation, a, b):
        ea, eb = exponent(a, i), exponent(b, i)
        if ea != eb:
            return sign(ea - eb)
    return 0


def grlex(permutation, a, b):
    return sign(sum(a) - sum(b)) or plex(permutation, a, b)


def tlex(permutation, a, b):
    degree = sign(sum(a) - sum(b))
    if degree:
        return degree
    for i in reversed(variable_indices(permutation, a, b)):
        ea, eb = exponent(a, i), exponent(b, i)
        if ea != eb:
            return sign(eb - ea)
    return 0


class MonomialOrder(ABC):
    @abstractmethod
    def compare(self, a, b) -> int: ...

    def __call__(self, a, b):
        return self.compare(a, b)

    def sort_key(self):
        return cmp_to_key(self.compare)

    def check(self, other):
        if self != other:
            raise OrderMismatchError(f"{self!r} and {other!r} are different orders")


@dataclass(frozen=True)
class PLex(MonomialOrder):
    """Pure lexicographic order.

    `permutation` lists variable indices from most to least significant;
    variables it leaves out follow in their natural order.
    """
    permutation: Optional[Tuple[int, ...]] = None

    def compare(self, a, b):
        return plex(self.permutation, a, b)


@dataclass(frozen=True)
class GrLex(MonomialOrder):
    """Graded lexicographic order: total degree first, ties by PLex."""
    permutation: Optional[Tuple[int, ...]] = None

    def compare(self, a, b):
        return grlex(self.permutation, a, b)


@dataclass(frozen=True)
class TLex(MonomialOrder):
    """Graded reverse lexicographic order.

    Total degree first; ties go to the vector with the smaller exponent in
    the last variable that differs.
    """
    permutation: Optional[Tuple[int, ...]] = None

    def compare(self, a, b):
        return tlex(self.permutation, a, b)


@dataclass(frozen=True)
class WeightOrder(MonomialOrder):
    """Weighted degree first, ties broken by `tie_break`."""
    weights: Tuple[int, ...]
    tie_break: MonomialOrder = PLex()

    def compare(self, a, b):
        wa = sum(w * e for w, e in zip(self.weights, a))
        wb = sum(w * e for w, e in zip(self.weights, b))
        return sign(wa - wb) or self.tie_break.compare(a, b)


@dataclass(frozen=True)
class FunctionOrder(MonomialOrder):
    """A user supplied comparison `fn(a, b) -> int` over power vectors."""
    fn: Callable[[tuple, tuple], int]

    def compare(self, a, b):
        return sign(self.fn(a, b))


def pad(a, b):
    return zip_longest(a, b, fillvalue=0)
