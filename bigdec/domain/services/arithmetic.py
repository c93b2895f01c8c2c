"""
Exact decimal primitives on canonical decimal strings.

Addition, subtraction and multiplication are exact. Division is the only
operation that needs a precision; it is correctly rounded to the requested
number of fractional digits.
"""

from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_05UP,
    Context,
    Decimal,
    Inexact,
    InvalidOperation,
    Overflow,
)

from bigdec.domain.exceptions import InvalidArgumentError, UndefinedOperationError
from bigdec.domain.values import RoundingMode

from .validators import DecimalLike, validate_decimal

DEFAULT_DIVIDE_PRECISION = 8

# With MAX_PREC add/subtract/multiply never round; Inexact is trapped anyway.
EXACT_CONTEXT = Context(
    prec=MAX_PREC,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, Overflow, Inexact],
)

ROUNDING_CONTEXT = Context(
    prec=MAX_PREC,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, Overflow],
)


def to_decimal(value: DecimalLike, label: str = "value") -> Decimal:
    return Decimal(validate_decimal(value, label))


def to_text(value: Decimal) -> str:
    """Fixed-point text of a Decimal, never '-0'."""
    if value.is_zero():
        value = value.copy_abs()

    return format(value, "f")


def quantize(value: Decimal, precision: int, mode: RoundingMode) -> Decimal:
    """
    Round ``value`` to ``precision`` fractional digits.

    :raises InvalidArgumentError: for UNNECESSARY when rounding would change the value
    """
    exponent = Decimal((0, (1,), -precision))

    if mode is RoundingMode.UNNECESSARY:
        rounded = value.quantize(
            exponent,
            rounding=RoundingMode.DOWN.decimal_rounding,
            context=ROUNDING_CONTEXT,
        )
        if rounded != value:
            raise InvalidArgumentError(
                "rounding", f"{to_text(value)} needs rounding at precision {precision}"
            )
        return rounded

    return value.quantize(
        exponent, rounding=mode.decimal_rounding, context=ROUNDING_CONTEXT
    )


def add(augend: DecimalLike, addend: DecimalLike) -> str:
    return to_text(EXACT_CONTEXT.add(to_decimal(augend), to_decimal(addend)))


def subtract(minuend: DecimalLike, subtrahend: DecimalLike) -> str:
    return to_text(
        EXACT_CONTEXT.subtract(to_decimal(minuend), to_decimal(subtrahend))
    )


def multiply(multiplicand: DecimalLike, multiplier: DecimalLike) -> str:
    return to_text(
        EXACT_CONTEXT.multiply(to_decimal(multiplicand), to_decimal(multiplier))
    )


def divide(
    dividend: DecimalLike,
    divisor: DecimalLike,
    precision: int = DEFAULT_DIVIDE_PRECISION,
    mode: RoundingMode = RoundingMode.HALF_EVEN,
) -> str:
    """
    Divide and round to ``precision`` fractional digits.

    The quotient is first computed with guard digits using ROUND_05UP,
    which keeps the final rounding free of double-rounding errors.

    :raises UndefinedOperationError: on division by zero
    """
    numerator = to_decimal(dividend, "dividend")
    denominator = to_decimal(divisor, "divisor")

    if denominator.is_zero():
        raise UndefinedOperationError(f"Division by zero: {to_text(numerator)} / 0")

    digits = max(numerator.adjusted() - denominator.adjusted() + precision + 4, 2)
    context = Context(prec=digits, rounding=ROUND_05UP, Emax=MAX_EMAX, Emin=MIN_EMIN)

    return to_text(quantize(context.divide(numerator, denominator), precision, mode))


def abs_value(value: DecimalLike) -> str:
    text = validate_decimal(value)
    return text[1:] if text.startswith("-") else text


def negate(value: DecimalLike) -> str:
    text = validate_decimal(value)

    if text == "0":
        return text

    return text[1:] if text.startswith("-") else "-" + text


def compare_to(left: DecimalLike, right: DecimalLike) -> int:
    """Returns -1, 0 or 1 as ``left`` is less than, equal to or greater than ``right``."""
    return int(to_decimal(left).compare(to_decimal(right)))


def equals(left: DecimalLike, right: DecimalLike) -> bool:
    return compare_to(left, right) == 0


def greater_than(left: DecimalLike, right: DecimalLike, or_equals: bool = False) -> bool:
    result = compare_to(left, right)
    return result > 0 or (or_equals and result == 0)


def less_than(left: DecimalLike, right: DecimalLike, or_equals: bool = False) -> bool:
    result = compare_to(left, right)
    return result < 0 or (or_equals and result == 0)


def is_exactly_zero(value: DecimalLike) -> bool:
    return validate_decimal(value) == "0"


def is_exactly_one(value: DecimalLike) -> bool:
    return validate_decimal(value) == "1"


def is_even(value: DecimalLike) -> bool:
    """Parity of the integer part."""
    integer_part = validate_decimal(value).partition(".")[0]
    return int(integer_part[-1]) % 2 == 0


def is_odd(value: DecimalLike) -> bool:
    return not is_even(value)
