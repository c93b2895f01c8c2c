import decimal
from enum import Enum
from typing import Optional


class RoundingMode(str, Enum):
    """
    Rounding policies applied when a result is finalized.

    UNNECESSARY asserts that the value is already representable at the
    requested precision and has no `decimal` counterpart.
    """

    UP = "UP"
    DOWN = "DOWN"
    CEILING = "CEILING"
    FLOOR = "FLOOR"
    HALF_UP = "HALF_UP"
    HALF_DOWN = "HALF_DOWN"
    HALF_EVEN = "HALF_EVEN"
    UNNECESSARY = "UNNECESSARY"

    @property
    def decimal_rounding(self) -> Optional[str]:
        return _DECIMAL_ROUNDING[self]

    def __str__(self) -> str:
        return self.value


_DECIMAL_ROUNDING = {
    RoundingMode.UP: decimal.ROUND_UP,
    RoundingMode.DOWN: decimal.ROUND_DOWN,
    RoundingMode.CEILING: decimal.ROUND_CEILING,
    RoundingMode.FLOOR: decimal.ROUND_FLOOR,
    RoundingMode.HALF_UP: decimal.ROUND_HALF_UP,
    RoundingMode.HALF_DOWN: decimal.ROUND_HALF_DOWN,
    RoundingMode.HALF_EVEN: decimal.ROUND_HALF_EVEN,
    RoundingMode.UNNECESSARY: None,
}
