"""
Nth root extraction.

``nth_root`` runs Newton's method with a working precision that grows with
every iteration and hands over to ``bisection_root`` as soon as the Newton
steps stop shrinking.
"""

from bigdec.domain.exceptions import (
    ConvergenceError,
    InvalidArgumentError,
    UndefinedOperationError,
)
from bigdec.shared.config import get_settings
from bigdec.shared.logging import get_logger

from .arithmetic import (
    abs_value,
    add,
    divide,
    equals,
    greater_than,
    is_exactly_zero,
    less_than,
    multiply,
    negate,
    subtract,
)
from .integer_power import int_pow
from .rounding import round_off, strip_trailing_zero, test_tolerance
from .validators import DecimalLike, validate_decimal, validate_integer

logger = get_logger(__name__)

MIN_ROOT_PRECISION = 32

# Newton's iteration index starts here, so the first steps already carry
# a few guard digits.
_FIRST_ITERATION = 4


def _root_degree(n: DecimalLike, label: str) -> int:
    degree = int(validate_integer(n, label))

    if degree < 1:
        raise InvalidArgumentError(label, f"root degree must be positive, got {degree}")

    return degree


def _initial_guess(x: str, degree: int) -> str:
    # Roughly 2^(bit_length / degree): every `degree` bits shifted out double the guess.
    value = int(round_off(x))
    guess = 1

    while value > degree:
        value >>= degree
        guess <<= 1

    return str(guess)


def nth_root(
    x: DecimalLike,
    n: DecimalLike,
    precision: int = 16,
    tolerance_budget: int = 16,
) -> str:
    """
    Compute x^(1/n) to ``precision`` fractional digits.

    :param x: Radicand
    :param n: Integer root degree
    :param precision: Working precision in fractional digits
    :param tolerance_budget: Convergence threshold exponent, 10^-(budget + i) at iteration i

    :return: The root rounded to ``precision + 2`` digits, trailing zeros stripped

    :raises InvalidArgumentError: if n is not a positive integer
    :raises UndefinedOperationError: for an even root of a negative number
    """
    degree = _root_degree(n, "nth_root n")
    x = validate_decimal(x, "nth_root x")

    if is_exactly_zero(x):
        return "0"

    if x.startswith("-"):
        if degree % 2 == 0:
            raise UndefinedOperationError(f"Even root of a negative number: {x}")
        return negate(nth_root(x[1:], degree, precision, tolerance_budget))

    n_text = str(degree)
    n_minus_one = str(degree - 1)

    guess = _initial_guess(x, degree)
    # The first step from the initial guess has nothing to be compared with.
    last_difference = None
    max_iterations = get_settings().NEWTON_MAX_ITERATIONS

    for i in range(_FIRST_ITERATION, _FIRST_ITERATION + max_iterations):
        quotient = strip_trailing_zero(
            divide(x, int_pow(guess, n_minus_one), precision + i + 2)
        )
        new_guess = strip_trailing_zero(
            divide(add(quotient, multiply(guess, n_minus_one)), n_text, precision + i)
        )
        difference = abs_value(subtract(guess, new_guess))

        if test_tolerance(difference, tolerance_budget + i):
            return strip_trailing_zero(round_off(new_guess, precision + 2))

        if last_difference is not None and greater_than(difference, last_difference):
            logger.debug(
                "nth_root_diverged",
                degree=degree,
                iteration=i,
                difference=difference,
                last_difference=last_difference,
            )
            return _finish_by_bisection(x, n_text, new_guess, precision)

        last_difference = difference
        guess = new_guess

    logger.warning(
        "nth_root_iteration_cap_reached",
        degree=degree,
        max_iterations=max_iterations,
        precision=precision,
    )
    return _finish_by_bisection(x, n_text, guess, precision)


def _finish_by_bisection(x: str, n: str, seed: str, precision: int) -> str:
    return strip_trailing_zero(
        round_off(bisection_root(x, n, seed, precision + 2), precision + 2)
    )


def bisection_root(
    x: DecimalLike, n: DecimalLike, seed: DecimalLike, precision: int = 32
) -> str:
    """
    Derivative-guided bisection for x^(1/n), the fallback when Newton diverges.

    The search interval starts as [-|seed|, |seed|]. At each midpoint v the
    residual f0 = v^n - x is weighed by the slope f1 = n * v^(n-1); a
    non-positive product moves the left edge, anything else the right one.
    The seed must not be smaller than the root (any Newton iterate satisfies
    this).

    Iteration stops once |f0| < 10^-precision and the interval is narrower
    than 10^-(precision + 2). The residual alone says nothing about v when x
    is small: at v = 0 it is x itself.

    :return: The midpoint rounded to ``precision + 2`` digits

    :raises UndefinedOperationError: for an even root of a negative number
    :raises ConvergenceError: if BISECTION_MAX_ITERATIONS is exhausted
    """
    degree = _root_degree(n, "bisection_root n")
    x = validate_decimal(x, "bisection_root x")
    seed = abs_value(seed)

    if x.startswith("-"):
        if degree % 2 == 0:
            raise UndefinedOperationError(f"Even root of a negative number: {x}")
        return negate(bisection_root(x[1:], degree, seed, precision))

    n_text = str(degree)
    n_minus_one = str(degree - 1)

    left = negate(seed)
    right = seed
    previous_residual = "0"
    max_iterations = get_settings().BISECTION_MAX_ITERATIONS

    for _ in range(max_iterations):
        midpoint = strip_trailing_zero(divide(add(left, right), "2", precision + 4))
        residual = subtract(int_pow(midpoint, n_text), x)
        slope = multiply(n_text, int_pow(midpoint, n_minus_one))

        if less_than(multiply(residual, slope), "0", or_equals=True):
            left = midpoint
        else:
            right = midpoint

        residual = abs_value(residual)

        if is_exactly_zero(residual) or (
            test_tolerance(residual, precision)
            and test_tolerance(subtract(right, left), precision + 2)
        ):
            return strip_trailing_zero(round_off(midpoint, precision + 2))

        if equals(residual, previous_residual):
            logger.debug("bisection_stalled", degree=degree, residual=residual)
            return strip_trailing_zero(round_off(midpoint, precision + 2))

        previous_residual = residual

    raise ConvergenceError("bisection_root", max_iterations)


def sq_root(base: DecimalLike, precision: int = 32) -> str:
    precision = max(precision, MIN_ROOT_PRECISION)
    return nth_root(base, "2", precision, precision + 1)


def cb_root(base: DecimalLike, precision: int = 32) -> str:
    precision = max(precision, MIN_ROOT_PRECISION)
    return nth_root(base, "3", precision, precision + 1)


def root4(base: DecimalLike, precision: int = 32) -> str:
    """Fourth root as two nested square roots."""
    precision = max(precision, MIN_ROOT_PRECISION)
    return sq_root(sq_root(base, precision + 4), precision)


def root5(base: DecimalLike, precision: int = 32) -> str:
    precision = max(precision, MIN_ROOT_PRECISION)
    return nth_root(base, "5", precision, precision + 1)


def root10(base: DecimalLike, precision: int = 32) -> str:
    precision = max(precision, MIN_ROOT_PRECISION)
    return nth_root(base, "10", precision, precision + 1)
