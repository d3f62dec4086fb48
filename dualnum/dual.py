from math import inf, log, pow as fpow
from typing import Iterator, Union

OTHER_OP_TYPES = Union[int, float]
_OTHER_OP_TYPES = (int, float)  # mypyc-friendly for isinstance
OP_TYPES = Union["Dual", OTHER_OP_TYPES]


class DomainError(ValueError):
    """An operation was applied outside the domain where it is defined (eg, inverting a zero real part)."""


def positive_pow(a: float, k: float) -> float:
    """a^k for a > 0, inf when the result overflows a float"""
    try:
        return fpow(a, k)
    except OverflowError:
        return inf


class Dual:
    """
    Dual number a + b*ε where ε^2 = 0.

    Stored as two floats:
        real     the ordinary value a
        epsilon  the infinitesimal part b (the derivative carried through arithmetic)

    Notes:
      - Values are immutable; every operation returns a new Dual.
      - The product keeps the cross term of the epsilon parts:
            (a + bε)(c + dε) = (ac - bd) + (ad + bc)ε
      - Division multiplies by the conjugate of the divisor, not by its inverse:
            x / y = x * conj(y)
      - A scalar s on either side of +, -, * is treated as Dual(s, 0).
    """

    __slots__ = ("_real", "_epsilon")

    _real: float
    _epsilon: float

    def __init__(self, real: OTHER_OP_TYPES = 0.0, epsilon: OTHER_OP_TYPES = 0.0) -> None:
        """
        Initialize a Dual.

        Args:
            real: The real part. Integers are converted to float.
            epsilon: The infinitesimal part. Integers are converted to float.
                Defaults to 0, so Dual(s) is the scalar s embedded in the dual numbers.
        """
        self._real = float(real)
        self._epsilon = float(epsilon)

    # region constructors / conversions
    @classmethod
    def _from_obj(cls, n: OP_TYPES) -> "Dual":
        """Convert a random object to a Dual"""
        if isinstance(n, Dual):
            return n

        if isinstance(n, _OTHER_OP_TYPES):
            # scalar s -> s + 0ε
            return cls(float(n), 0.0)

        return NotImplemented
    # endregion

    @property
    def real(self) -> float:
        """The real part a of a + bε"""
        return self._real

    @property
    def epsilon(self) -> float:
        """The infinitesimal part b of a + bε"""
        return self._epsilon

    def is_zero(self) -> bool:
        """Exactly the additive identity 0 + 0ε"""
        return self._real == 0.0 and self._epsilon == 0.0

    def is_unity(self) -> bool:
        """Exactly the multiplicative identity 1 + 0ε"""
        return self._real == 1.0 and self._epsilon == 0.0

    def conjugate(self) -> "Dual":
        """Dual conjugation: a+bε -> a-bε"""
        return Dual(self._real, -self._epsilon)

    def norm(self) -> float:
        """a^2 + b^2, never negative."""
        return self._real * self._real + self._epsilon * self._epsilon

    def invert(self) -> "Dual":
        """
        Multiplicative inverse.

        Writing a + bε = a(1 + (b/a)ε) and using 1/(1+x) = 1 - x to first order:
            1 / (a + bε) = 1/a - (b/a^2)ε

        Raises:
            DomainError: If the real part is 0.

        Returns:
            Dual: The inverse.
        """
        if self._real == 0.0:
            raise DomainError("Real part of this Dual number cannot be zero to calculate the inverse")

        # a*a underflows to 0 for a tiny nonzero a
        return Dual(1.0 / self._real, -self._epsilon / self._real / self._real)

    def __add__(self, other: OP_TYPES) -> "Dual":
        if isinstance(other, _OTHER_OP_TYPES):
            other = self._from_obj(other)

        if isinstance(other, Dual):
            return Dual(self._real + other._real, self._epsilon + other._epsilon)

        return NotImplemented

    def __radd__(self, other: OTHER_OP_TYPES) -> "Dual":
        return self.__add__(other)

    def __sub__(self, other: OP_TYPES) -> "Dual":
        if isinstance(other, _OTHER_OP_TYPES):
            other = self._from_obj(other)

        if isinstance(other, Dual):
            return Dual(self._real - other._real, self._epsilon - other._epsilon)

        return NotImplemented

    def __rsub__(self, other: OTHER_OP_TYPES) -> "Dual":
        # s - x is computed as (-x) + s
        return self.__neg__().__add__(other)

    def __neg__(self) -> "Dual":
        return Dual(-self._real, -self._epsilon)

    def __pos__(self) -> "Dual":
        return Dual(self._real, self._epsilon)

    def __mul__(self, other: OP_TYPES) -> "Dual":
        if isinstance(other, _OTHER_OP_TYPES):
            other = self._from_obj(other)

        if not isinstance(other, Dual):
            return NotImplemented

        a, b = self._real, self._epsilon
        c, d = other._real, other._epsilon

        # The bd term is kept in the real part
        return Dual(a * c - b * d, a * d + b * c)

    def __rmul__(self, other: OTHER_OP_TYPES) -> "Dual":
        return self.__mul__(other)

    def __truediv__(self, other: OP_TYPES) -> "Dual":
        """
        Division.

        By a Dual: x / y = x * conj(y). This never raises, even for a zero divisor.
        By a scalar: both parts are divided by it, raising ZeroDivisionError for 0.
        """
        if isinstance(other, _OTHER_OP_TYPES):
            return Dual(self._real / other, self._epsilon / other)

        if isinstance(other, Dual):
            return self.__mul__(other.conjugate())

        return NotImplemented

    def __rtruediv__(self, other: OTHER_OP_TYPES) -> "Dual":
        """
        s / x, computed with the true inverse of x: s * x^-1

        Raises:
            DomainError: If the real part of x is 0.
        """
        if isinstance(other, _OTHER_OP_TYPES):
            return self.invert().__mul__(other)

        return NotImplemented

    # region powers
    def pow_int(self, exponent: int) -> "Dual":
        """Integer power, computed through the float formula."""
        return self.pow_float(float(exponent))

    def pow_float(self, exponent: float) -> "Dual":
        """
        Real power.

        Writing a + bε = a(1 + (b/a)ε) and using (1+x)^k = 1 + kx to first order:
            (a + bε)^k = a^k + k(b/a)a^k ε

        Raises:
            DomainError: If the real part is not positive.

        Returns:
            Dual: The power.
        """
        if not self._real > 0.0:
            raise DomainError("Real part of this Dual number must be positive to raise it to a real power")

        a, b = self._real, self._epsilon

        real_part = positive_pow(a, exponent)
        epsilon_part = (exponent * b / a) * real_part
        return Dual(real_part, epsilon_part)

    def pow_dual(self, exponent: "Dual") -> "Dual":
        """
        Raise this Dual to the power of another Dual.

        Using x^y = exp(y * ln(x)), where every higher order term vanishes since ε^2 = 0:
            ln(a + bε)              = ln(a) + (b/a)ε
            (c + dε) * ln(a + bε)   = c ln(a) + (d ln(a) + cb/a)ε
            exp(r + sε)             = e^r + s e^r ε

        So:
            (a + bε)^(c + dε) = a^c + (cb/a + d ln(a)) a^c ε

        A zero real part is allowed for a positive exponent, where the result is 0.

        Raises:
            DomainError: If the real part is 0 and the exponent's real part is not positive,
                or if the real part is negative.

        Returns:
            Dual: The power.
        """
        if self._real == 0.0:
            if exponent._real > 0.0:
                return ZERO
            raise DomainError("Undefined: 0 raised to non-positive exponent")

        if not self._real > 0.0:
            raise DomainError("Real part of this Dual number must be positive to raise it to a Dual power")

        a, b = self._real, self._epsilon
        c, d = exponent._real, exponent._epsilon

        real_part = positive_pow(a, c)
        epsilon_part = (c * b / a + d * log(a)) * real_part
        return Dual(real_part, epsilon_part)

    def pow(self, exponent: OP_TYPES) -> "Dual":
        """
        Dispatch to pow_int, pow_float or pow_dual on the type of the exponent.

        Raises:
            TypeError: If the exponent is not an int, float or Dual.
        """
        if isinstance(exponent, Dual):
            return self.pow_dual(exponent)

        if isinstance(exponent, int):
            return self.pow_int(exponent)

        if isinstance(exponent, float):
            return self.pow_float(exponent)

        raise TypeError(f"Unable to raise Dual to the power of type {type(exponent)}")

    def __pow__(self, exponent: OP_TYPES) -> "Dual":
        if isinstance(exponent, Dual) or isinstance(exponent, _OTHER_OP_TYPES):
            return self.pow(exponent)

        return NotImplemented

    def __rpow__(self, base: OTHER_OP_TYPES) -> "Dual":
        if isinstance(base, _OTHER_OP_TYPES):
            return self._from_obj(base).pow_dual(self)

        return NotImplemented
    # endregion

    def __abs__(self) -> float:
        return self.norm()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __iter__(self) -> Iterator[float]:
        return iter((self._real, self._epsilon))

    def __len__(self) -> int:
        return 2

    def __getitem__(self, idx: int) -> float:
        if idx == 0:
            return self._real
        if idx == 1:
            return self._epsilon
        raise IndexError("Dual index out of range (valid: 0..1)")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dual):
            return False

        return self._real == other._real and self._epsilon == other._epsilon

    def __hash__(self) -> int:
        return hash((self._real, self._epsilon))

    def __repr__(self) -> str:
        return f"Dual({self._real!r}, {self._epsilon!r})"

    def __str__(self) -> str:
        return f"{self._real} + {self._epsilon}ε"


ZERO = Dual(0.0, 0.0)
ONE = Dual(1.0, 0.0)
E = Dual(0.0, 1.0)
DUAL_UNIT = E
