"""
Digit-wise decomposition of fractional exponents.

Since 10 = 2 * 5, every tenth of an exponent is reachable from a square
root (1/2), a fifth root (1/5) and the square root of a fifth root (1/10).
For the digit d at fractional position i, the running base
b_i = base^(1/10^i) contributes b_i^(d/10); the running base for the next
position is then the tenth root of the current one.
"""

from enum import Enum
from fractions import Fraction
from functools import cached_property
from typing import Mapping

from .arithmetic import multiply
from .integer_power import int_pow
from .roots import nth_root


class RootStep(str, Enum):
    FIFTH = "fifth"
    SQUARE = "square"
    TENTH = "tenth"

    @property
    def exponent(self) -> Fraction:
        return _STEP_EXPONENTS[self]


_STEP_EXPONENTS = {
    RootStep.FIFTH: Fraction(1, 5),
    RootStep.SQUARE: Fraction(1, 2),
    RootStep.TENTH: Fraction(1, 10),
}

# digit -> ((root, power), ...); the contribution is the product of root**power.
DIGIT_DECOMPOSITION: Mapping[str, tuple[tuple[RootStep, int], ...]] = {
    "0": (),
    "1": ((RootStep.TENTH, 1),),
    "2": ((RootStep.FIFTH, 1),),
    "3": ((RootStep.FIFTH, 1), (RootStep.TENTH, 1)),
    "4": ((RootStep.FIFTH, 2),),
    "5": ((RootStep.SQUARE, 1),),
    "6": ((RootStep.FIFTH, 3),),
    "7": ((RootStep.FIFTH, 1), (RootStep.SQUARE, 1)),
    "8": ((RootStep.FIFTH, 4),),
    "9": ((RootStep.FIFTH, 2), (RootStep.SQUARE, 1)),
}


def digit_exponent(digit: str) -> Fraction:
    """The exponent a digit's decomposition raises its running base to."""
    return sum(
        (step.exponent * power for step, power in DIGIT_DECOMPOSITION[digit]),
        Fraction(0),
    )


class DigitPosition:
    """
    Roots of the running base at one fractional digit position.

    Each root is extracted at most once, and only when a digit needs it.
    The fifth root gets one extra digit of precision per position, since
    every later position is built on top of it.
    """

    def __init__(
        self, value: str, position: int, min_precision: int, tolerance_budget: int
    ):
        self.value = value
        self.position = position
        self._min_precision = min_precision
        self._tolerance_budget = tolerance_budget

    @cached_property
    def fifth(self) -> str:
        return nth_root(
            self.value,
            "5",
            self._min_precision + self.position,
            self._tolerance_budget + self.position,
        )

    @cached_property
    def square(self) -> str:
        return nth_root(self.value, "2", self._min_precision, self._tolerance_budget)

    @cached_property
    def tenth(self) -> str:
        return nth_root(self.fifth, "2", self._min_precision, self._tolerance_budget)

    def root(self, step: RootStep) -> str:
        return getattr(self, step.value)

    def contribution(self, digit: str) -> str:
        result = "1"

        for step, power in DIGIT_DECOMPOSITION[digit]:
            result = multiply(result, int_pow(self.root(step), str(power)))

        return result


def fractional_power(
    base: str, significand: str, min_precision: int, tolerance_budget: int
) -> str:
    """
    Compute base^(0.<significand>) for a non-negative base.

    :param base: Non-negative decimal base
    :param significand: Digits after the exponent's separator
    :param min_precision: Working precision of the root extractions
    :param tolerance_budget: Convergence budget of the root extractions

    :return: The unrounded product of all digit contributions
    """
    accumulator = "1"
    running_base = base

    for i, digit in enumerate(significand):
        position = DigitPosition(running_base, i, min_precision, tolerance_budget)

        if digit != "0":
            accumulator = multiply(accumulator, position.contribution(digit))

        if i < len(significand) - 1:
            running_base = position.tenth

    return accumulator
