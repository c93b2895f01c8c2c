from decimal import Decimal, localcontext

import pytest
from bigdec.domain.exceptions import InvalidArgumentError, UndefinedOperationError
from bigdec.domain.services import inverse_sq_root, negate, pow, sq_root


def _reference_power(base: str, exponent: str) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = 80
        return Decimal(base) ** Decimal(exponent)


def _close(actual: str, expected, places: int) -> bool:
    return abs(Decimal(actual) - Decimal(expected)) < Decimal(1).scaleb(-places)


def test_pow_integer_exponents():
    assert pow("2", "2") == "4"
    assert pow("-2", "2") == "4"
    assert pow("-2", "3") == "-8"
    assert pow("1.5", "3") == "3.375"


def test_pow_negation():
    assert pow("2", "2", 32, True) == "-4"
    assert pow("-2", "2", 32, True) == "-4"
    assert pow("-2", "3", 32, True) == "8"


@pytest.mark.parametrize("base", ["0", "2", "-3.5", "123456789.987654321"])
def test_pow_zero_exponent_is_one(base):
    assert pow(base, "0") == "1"
    assert pow(base, "-0.000") == "1"


@pytest.mark.parametrize("base", ["0", "2", "-3.5", "0.000000000000000000000000000000000001"])
def test_pow_exponent_one_is_identity(base):
    assert pow(base, "1") == base
    assert pow(base, "1.000") == base


def test_zero_to_minus_one_is_undefined():
    with pytest.raises(UndefinedOperationError):
        pow("0", "-1")


def test_zero_to_other_negative_powers_is_undefined():
    with pytest.raises(UndefinedOperationError):
        pow("0", "-2")

    with pytest.raises(UndefinedOperationError):
        pow("0", "-0.5")


def test_zero_to_positive_powers():
    assert pow("0", "3") == "0"
    assert pow("0", "0.5") == "0"


def test_pow_negative_exponent_takes_reciprocal():
    assert pow("2", "-2") == "0.25"
    assert pow("4", "-0.5", 10) == "0.5"
    assert pow("3", "-1", 5) == "0.33333"


def test_pow_of_ten_shortcut():
    assert pow("10", "3") == "1000"
    assert pow("10", "-2") == "0.01"
    assert pow("-10", "3") == "-1000"
    assert pow("-10", "2") == "100"


def test_pow_of_ten_with_fraction():
    assert _close(pow("10", "2.5", 20), _reference_power("10", "2.5"), 19)


def test_pow_square_root_of_two():
    assert pow("2", "0.5", 10) == "1.4142135624"


def test_pow_agrees_with_sq_root():
    assert _close(sq_root("2", 32), pow("2", "0.5", 32), 30)


@pytest.mark.parametrize("digit", [str(d) for d in range(1, 10)])
def test_pow_every_single_digit_fraction(digit):
    exponent = "0." + digit

    assert _close(pow("2", exponent, 20), _reference_power("2", exponent), 19)


@pytest.mark.parametrize(
    "base, exponent",
    [
        ("1.5", "2.5"),
        ("2", "0.37"),
        ("7.25", "1.125"),
        ("3", "2.718"),
        ("0.5", "1.5"),
        ("2", "-1.5"),
    ],
)
def test_pow_real_exponents(base, exponent):
    assert _close(pow(base, exponent, 20), _reference_power(base, exponent), 18)


def test_pow_fractional_exponent_of_negative_base_flips_sign():
    assert pow("-4", "0.5", 10) == "-2"
    assert pow("-4", "0.5", 10, True) == "2"


@pytest.mark.parametrize(
    "base, exponent",
    [("2", "2"), ("-2", "3"), ("2", "0.5"), ("1.5", "-2.5"), ("0", "4"), ("-4", "0.5")],
)
def test_pow_negate_flag_negates_result(base, exponent):
    assert pow(base, exponent, 16, True) == negate(pow(base, exponent, 16, False))


def test_pow_rounds_to_precision():
    assert pow("1.5", "2", 0) == "2"
    assert pow("1.5", "2", 1) == "2.2"
    assert pow("2", "0.5", 3) == "1.414"


def test_pow_rejects_malformed_input():
    with pytest.raises(InvalidArgumentError):
        pow("abc", "2")

    with pytest.raises(InvalidArgumentError):
        pow("2", "1e3")


def test_inverse_sq_root_of_one():
    assert inverse_sq_root("1") == "1"


def test_inverse_sq_root_estimates():
    with localcontext() as ctx:
        ctx.prec = 60
        half_root = 1 / Decimal(2).sqrt()
        root = Decimal(2).sqrt()

    assert _close(inverse_sq_root("2"), half_root, 30)
    assert _close(inverse_sq_root("0.5"), root, 30)


@pytest.mark.parametrize("number", ["0", "-0.0", "-4"])
def test_inverse_sq_root_of_non_positive_number_is_undefined(number):
    with pytest.raises(UndefinedOperationError):
        inverse_sq_root(number)
