from dualnum.algebra import HypercomplexAlgebra
from dualnum.dual import DUAL_UNIT, E, ONE, ZERO, DomainError, Dual
from dualnum.utils import derivative, dual_exp, dual_log, value_and_derivative

__all__ = [
    "HypercomplexAlgebra",
    "Dual",
    "DomainError",
    "ZERO",
    "ONE",
    "E",
    "DUAL_UNIT",
    "dual_exp",
    "dual_log",
    "derivative",
    "value_and_derivative",
]
