from bigdec.domain.exceptions import UndefinedOperationError
from bigdec.domain.values import RoundingMode

from .arithmetic import (
    abs_value,
    divide,
    equals,
    greater_than,
    is_exactly_one,
    is_exactly_zero,
    is_odd,
    less_than,
    multiply,
    subtract,
)
from .arithmetic import negate as negate_value
from .fractional_exponent import fractional_power
from .integer_power import int_pow
from .rounding import round_off, strip_trailing_zero, tolerance
from .roots import MIN_ROOT_PRECISION
from .validators import DecimalLike, validate_decimal

INVERSE_SQ_ROOT_PRECISION = 33
INVERSE_SQ_ROOT_MAX_ITERATIONS = 10


def pow(
    base: DecimalLike,
    exponent: DecimalLike,
    precision: int = 32,
    negate: bool = False,
) -> str:
    """
    Raise a decimal to an arbitrary decimal power.

    The integer part of the exponent is applied exactly with ``int_pow``; the
    fractional part is built digit by digit from square and fifth roots.

    :param base: Decimal base
    :param exponent: Decimal exponent
    :param precision: Fractional digits of the result
    :param negate: Evaluate as -(base ^ exponent)

    :return: The power, rounded to ``precision`` and without trailing zeros

    :raises UndefinedOperationError: for 0^(-1) (and any other negative power of zero)

    Examples:
        >>> pow("2", "2")
        '4'
        >>> pow("-2", "3")
        '-8'
        >>> pow("-2", "3", negate=True)
        '8'
        >>> pow("2", "0.5", 10)
        '1.4142135624'
    """
    base = validate_decimal(base, "pow base")
    exponent = validate_decimal(exponent, "pow exponent")

    if is_exactly_zero(exponent):
        return "1"

    negative_exponent = exponent.startswith("-")

    if not negative_exponent and is_exactly_one(exponent):
        return base

    if is_exactly_zero(base) and negative_exponent and is_exactly_one(abs_value(exponent)):
        raise UndefinedOperationError("0^(-1) is undefined")

    negative_base = base.startswith("-")
    integer_part, _, significand = abs_value(exponent).partition(".")

    if equals(abs_value(base), "10"):
        result = "1" + "0" * int(integer_part)
        if negative_base and is_odd(integer_part):
            result = "-" + result
    else:
        result = int_pow(base, integer_part)

    if significand:
        if negative_base:
            negate = not negate

        ceiling = int(round_off(exponent, 0, RoundingMode.CEILING))
        min_precision = max(
            precision + len(base) * ceiling,
            precision + len(base),
        )

        result = multiply(
            result,
            fractional_power(
                abs_value(base),
                significand,
                min_precision,
                max(precision, MIN_ROOT_PRECISION),
            ),
        )

    return _finalize(result, precision, negative_exponent, negate)


def _finalize(result: str, precision: int, negative_exponent: bool, negate: bool) -> str:
    if negative_exponent:
        result = divide("1", result, precision + 1)

    result = round_off(result, precision)

    if negate:
        result = negate_value(result)

    return strip_trailing_zero(result)


def inverse_sq_root(number: DecimalLike) -> str:
    """
    Estimate 1/sqrt(number) with at most ten Newton steps at 33 digits.

    guess <- guess * (1.5 - number/2 * guess^2), starting from 1. Stops
    early, returning the previous guess, when a step grows or drops below
    10^-31. This is an estimator: the guess converges for numbers below 3,
    for anything else use ``sq_root`` and divide.

    :raises UndefinedOperationError: if number is zero or negative
    """
    number = validate_decimal(number, "inverse_sq_root number")

    if less_than(number, "0", or_equals=True):
        raise UndefinedOperationError(f"Inverse square root of a non-positive number: {number}")

    half = divide(number, "2", INVERSE_SQ_ROOT_PRECISION)
    threshold = tolerance(INVERSE_SQ_ROOT_PRECISION - 2)

    guess = "1"
    previous_difference = abs_value(number)

    for _ in range(INVERSE_SQ_ROOT_MAX_ITERATIONS):
        correction = round_off(
            multiply(half, pow(guess, "2", INVERSE_SQ_ROOT_PRECISION)),
            INVERSE_SQ_ROOT_PRECISION,
        )
        new_guess = round_off(
            multiply(guess, subtract("1.5", correction)), INVERSE_SQ_ROOT_PRECISION
        )
        difference = abs_value(subtract(guess, new_guess))

        if greater_than(difference, previous_difference) or less_than(difference, threshold):
            break

        previous_difference = difference
        guess = new_guess

    return strip_trailing_zero(round_off(guess, INVERSE_SQ_ROOT_PRECISION))
