from bigdec.domain.values import RoundingMode

from .arithmetic import quantize, to_decimal, to_text
from .validators import DecimalLike, validate_decimal


def round_off(
    value: DecimalLike,
    precision: int = 0,
    mode: RoundingMode = RoundingMode.HALF_EVEN,
) -> str:
    """
    Round a value to ``precision`` fractional digits.

    The result keeps exactly ``precision`` fractional digits ("1.5" at
    precision 3 is "1.500"). A negative precision rounds to tens, hundreds
    and so on.

    :param value: Value to round
    :param precision: Number of fractional digits to keep
    :param mode: Rounding mode

    :return: Rounded value in fixed-point notation
    """
    return to_text(quantize(to_decimal(value), precision, RoundingMode(mode)))


def strip_trailing_zero(value: DecimalLike) -> str:
    """Drop superfluous fractional zeros and leading zeros ("007.50" -> "7.5")."""
    return validate_decimal(value)


def tolerance(precision_budget: int) -> str:
    """Returns 10^(-precision_budget) as text."""
    precision_budget = int(precision_budget)

    if precision_budget <= 0:
        return "1" + "0" * -precision_budget

    return "0." + "0" * (precision_budget - 1) + "1"


def test_tolerance(value: DecimalLike, precision_budget: int) -> bool:
    """True when ``|value|`` is strictly below 10^(-precision_budget)."""
    return to_decimal(value).copy_abs() < to_decimal(tolerance(precision_budget))


# Not a pytest test, despite the name.
test_tolerance.__test__ = False
