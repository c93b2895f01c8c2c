from .arithmetic import (
    abs_value,
    add,
    compare_to,
    divide,
    equals,
    greater_than,
    is_even,
    is_exactly_one,
    is_exactly_zero,
    is_odd,
    less_than,
    multiply,
    negate,
    subtract,
)
from .formatting import get_pretty_value
from .fractional_exponent import DIGIT_DECOMPOSITION, RootStep, fractional_power
from .integer_power import int_pow
from .power import inverse_sq_root, pow
from .roots import bisection_root, cb_root, nth_root, root4, root5, root10, sq_root
from .rounding import round_off, strip_trailing_zero, test_tolerance, tolerance
from .validators import DecimalLike, validate_decimal, validate_integer

__all__ = [
    "DecimalLike",
    "DIGIT_DECOMPOSITION",
    "RootStep",
    "abs_value",
    "add",
    "bisection_root",
    "cb_root",
    "compare_to",
    "divide",
    "equals",
    "fractional_power",
    "get_pretty_value",
    "greater_than",
    "int_pow",
    "inverse_sq_root",
    "is_even",
    "is_exactly_one",
    "is_exactly_zero",
    "is_odd",
    "less_than",
    "multiply",
    "negate",
    "nth_root",
    "pow",
    "root4",
    "root5",
    "root10",
    "round_off",
    "sq_root",
    "strip_trailing_zero",
    "subtract",
    "test_tolerance",
    "tolerance",
    "validate_decimal",
    "validate_integer",
]
