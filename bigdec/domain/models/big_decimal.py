from dataclasses import dataclass
from functools import total_ordering

from bigdec.domain.services import (
    abs_value,
    add,
    compare_to,
    divide,
    get_pretty_value,
    multiply,
    negate,
    pow,
    round_off,
    sq_root,
    subtract,
)
from bigdec.domain.services.arithmetic import DEFAULT_DIVIDE_PRECISION
from bigdec.domain.services.validators import DecimalLike, validate_decimal
from bigdec.domain.values import RoundingMode


@total_ordering
@dataclass(frozen=True)
class BigDecimal:
    """
    Immutable arbitrary-precision decimal.

    A thin wrapper around one canonical decimal string; every operation is
    delegated to the free functions in ``bigdec.domain.services`` and
    returns a new instance.
    """

    value: str = "0"

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", validate_decimal(self.value))

    def __str__(self) -> str:
        return self.value

    def get_value(self) -> str:
        return self.value

    def get_pretty_value(self, digits: int = 3, separator: str = ",") -> str:
        return get_pretty_value(self.value, digits, separator)

    def round(
        self, precision: int = 0, mode: RoundingMode = RoundingMode.HALF_EVEN
    ) -> "BigDecimal":
        return BigDecimal(round_off(self.value, precision, mode))

    def floor(self) -> "BigDecimal":
        return self.round(0, RoundingMode.FLOOR)

    def ceil(self) -> "BigDecimal":
        return self.round(0, RoundingMode.CEILING)

    def add(self, other: DecimalLike) -> "BigDecimal":
        return BigDecimal(add(self.value, other))

    def subtract(self, other: DecimalLike) -> "BigDecimal":
        return BigDecimal(subtract(self.value, other))

    def multiply(self, other: DecimalLike) -> "BigDecimal":
        return BigDecimal(multiply(self.value, other))

    def divide(
        self, other: DecimalLike, precision: int = DEFAULT_DIVIDE_PRECISION
    ) -> "BigDecimal":
        return BigDecimal(divide(self.value, other, precision))

    def compare_to(self, other: DecimalLike) -> int:
        return compare_to(self.value, other)

    def negate(self) -> "BigDecimal":
        return BigDecimal(negate(self.value))

    def abs(self) -> "BigDecimal":
        return BigDecimal(abs_value(self.value))

    def pow(
        self, exponent: DecimalLike, precision: int = 32, negate: bool = False
    ) -> "BigDecimal":
        return BigDecimal(pow(self.value, exponent, precision, negate))

    def sq_root(self, precision: int = 32) -> "BigDecimal":
        return BigDecimal(sq_root(self.value, precision))

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply

    def __radd__(self, other: DecimalLike) -> "BigDecimal":
        return BigDecimal(add(other, self.value))

    def __rsub__(self, other: DecimalLike) -> "BigDecimal":
        return BigDecimal(subtract(other, self.value))

    def __rmul__(self, other: DecimalLike) -> "BigDecimal":
        return BigDecimal(multiply(other, self.value))

    def __neg__(self) -> "BigDecimal":
        return self.negate()

    def __abs__(self) -> "BigDecimal":
        return self.abs()

    # Ordering follows equality: only other BigDecimal instances compare.
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BigDecimal):
            return NotImplemented

        return self.compare_to(other) < 0
