"""Discrete Fourier transform over any ring with a primitive root of unity."""
import logging

from .univariate import Polynomial

logger = logging.getLogger(__name__)


class PrimitiveRootOfUnity:
    """An element `value` with value**n == 1 and value**i != 1 for 0 < i < n."""
    __slots__ = ("n", "value", "inverse")

    def __init__(self, n, omega):
        assert n >= 1, n
        inverse = omega
        power = omega
        for i in range(1, n):
            if power.is_one() or power.is_zero():
                raise ValueError(f"{omega!r}**{i} = {power!r}, not a primitive {n}-th root")
            inverse = power
            power = power * omega
        if not power.is_one():
            raise ValueError(f"{omega!r}**{n} = {power!r}, not one")
        self.n = n
        self.value = omega
        self.inverse = inverse

    @classmethod
    def new(cls, n, omega):
        try:
            return cls(n, omega)
        except ValueError:
            return None

    def inverted(self):
        """The root `value**-1`, of the same order."""
        return PrimitiveRootOfUnity(self.n, self.inverse)

    def __eq__(self, other):
        if not isinstance(other, PrimitiveRootOfUnity):
            return NotImplemented
        return self.n == other.n and self.value == other.value

    __hash__ = None

    def __repr__(self):
        return f"PrimitiveRootOfUnity({self.n}, {self.value!r})"


def fft(k, f, root):
    """[f(1), f(w), f(w**2), ..., f(w**(n-1))] for n = 2**k and w = root.value."""
    n = 2 ** k
    assert root.n == n, (root.n, n)
    assert f.degree < n, (f.degree, n)
    return transform(k, [f.coef_at(i) for i in range(n)], root.value, f.field.zero())


def transform(k, coefs, omega, zero):
    if k == 0:
        return [coefs[0]]
    half = len(coefs) // 2
    r0 = []
    r1 = []
    twiddle = omega.one_like()
    for j in range(half):
        a, b = coefs[j], coefs[j + half]
        r0.append(a + b)
        r1.append((a - b) * twiddle)
        twiddle = twiddle * omega
    omega_sq = omega * omega
    even = transform(k - 1, r0, omega_sq, zero)
    odd = transform(k - 1, r1, omega_sq, zero)
    res = [zero] * len(coefs)
    res[0::2] = even
    res[1::2] = odd
    assert len(res) == 2 ** k
    return res


def fast_convolution(k, f, g, root):
    """f * g mod x**n - 1 for n = 2**k.

    When deg f + deg g < n this is the ordinary product.
    """
    n = 2 ** k
    assert root.n == n, (root.n, n)
    alpha = fft(k, f, root)
    beta = fft(k, g, root)
    logger.debug("alpha = %r", alpha)
    logger.debug("beta = %r", beta)
    gamma = [a * b for a, b in zip(alpha, beta)]
    logger.debug("gamma = %r", gamma)
    field = f.field
    n_inverse = field.from_natural(n).multiplicative_inverse()
    assert n_inverse is not None, f"{n} is not a unit"
    values = fft(k, Polynomial(gamma, field), root.inverted())
    return Polynomial(values, field).scale(n_inverse)
