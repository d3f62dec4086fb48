from typing import Protocol, TypeVar, Union, runtime_checkable

T = TypeVar("T", bound="HypercomplexAlgebra")


@runtime_checkable
class HypercomplexAlgebra(Protocol[T]):
    """
    The operations every hypercomplex number type provides.

    T is the implementing type itself, so chained operations keep the concrete type:
        x: Dual; (x + x) * x  ->  Dual

    Scalar operands (int or float) on either side of an operator behave as if the scalar
    were first embedded in T (s -> s + 0*unit) and the T-T operation applied.

    Notes:
      - is_zero and is_unity are exact tests, there is no tolerance.
      - The three power forms are specified separately, pow only dispatches between them.
      - invert raises when no inverse exists.
      - norm is a non-negative float whose definition belongs to each family.
    """

    def is_zero(self) -> bool:
        ...

    def is_unity(self) -> bool:
        ...

    def __neg__(self) -> T:
        ...

    def __add__(self, other: Union[T, int, float]) -> T:
        ...

    def __radd__(self, other: Union[int, float]) -> T:
        ...

    def __sub__(self, other: Union[T, int, float]) -> T:
        ...

    def __rsub__(self, other: Union[int, float]) -> T:
        ...

    def __mul__(self, other: Union[T, int, float]) -> T:
        ...

    def __rmul__(self, other: Union[int, float]) -> T:
        ...

    def __truediv__(self, other: Union[T, int, float]) -> T:
        ...

    def __rtruediv__(self, other: Union[int, float]) -> T:
        ...

    def pow_int(self, exponent: int) -> T:
        ...

    def pow_float(self, exponent: float) -> T:
        ...

    def pow_dual(self, exponent: T) -> T:
        ...

    def pow(self, exponent: Union[T, int, float]) -> T:
        """Dispatch to pow_int, pow_float or pow_dual on the type of the exponent."""
        ...

    def invert(self) -> T:
        ...

    def conjugate(self) -> T:
        ...

    def norm(self) -> float:
        ...
