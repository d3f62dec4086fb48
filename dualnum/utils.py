from math import exp, inf, log
from typing import Callable, Union

from dualnum.dual import OP_TYPES, DomainError, Dual

_SCALAR_TYPES = (int, float)  # mypyc-friendly for isinstance


def dual_exp(x: OP_TYPES) -> Dual:
    """
    exp(a + bε) = e^a + b e^a ε

    Scalars are embedded as s + 0ε first. A real part too large for exp gives inf.
    """
    if isinstance(x, _SCALAR_TYPES):
        x = Dual(x)

    try:
        real_part = exp(x.real)
    except OverflowError:
        real_part = inf

    return Dual(real_part, x.epsilon * real_part)


def dual_log(x: OP_TYPES) -> Dual:
    """
    ln(a + bε) = ln(a) + (b/a)ε

    Raises:
        DomainError: If the real part is not positive.

    Returns:
        Dual: The natural logarithm.
    """
    if isinstance(x, _SCALAR_TYPES):
        x = Dual(x)

    if not x.real > 0.0:
        raise DomainError("Real part of this Dual number must be positive to take its logarithm")

    return Dual(log(x.real), x.epsilon / x.real)


def value_and_derivative(fn: Callable[[Dual], Union[Dual, int, float]], x: float) -> tuple[float, float]:
    """
    Forward-mode differentiation of a one-variable function at x.

    fn is called once with the seed x + 1ε; the real part of the result is fn(x) and the
    epsilon part is fn'(x). A function returning a plain number is constant in its argument.

    Notes:
      - Exact for +, -, the power forms, dual_exp and dual_log, and for * and / by scalars.
      - Dual * Dual keeps the textbook epsilon part (ad + bc), so the derivative of a product
        is exact, but its real part carries the -bd term, so the value of a product is not.
      - Dual / Dual multiplies by the conjugate and does not give the quotient rule.

    Raises:
        TypeError: If fn returns something other than a Dual or a number.

    Returns:
        tuple: fn(x) and fn'(x).
    """
    res = fn(Dual(x, 1.0))

    if isinstance(res, Dual):
        return res.real, res.epsilon

    if isinstance(res, _SCALAR_TYPES):
        return float(res), 0.0

    raise TypeError(f"Expected a Dual or a number from {fn!r}, got type {type(res)}")


def derivative(fn: Callable[[Dual], Union[Dual, int, float]], x: float) -> float:
    """Simply a helper method returning only fn'(x) from value_and_derivative"""
    _, dx = value_and_derivative(fn, x)
    return dx
