from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest
from bigdec.domain.exceptions import InvalidArgumentError
from bigdec.domain.models import BigDecimal
from bigdec.domain.values import RoundingMode


def test_big_decimal_canonicalizes_on_creation():
    assert BigDecimal("007.50").value == "7.5"
    assert BigDecimal().value == "0"
    assert BigDecimal(12).value == "12"
    assert BigDecimal(Decimal("-0.10")).value == "-0.1"
    assert BigDecimal(BigDecimal("3.0")).value == "3"


def test_big_decimal_rejects_invalid_values():
    with pytest.raises(InvalidArgumentError):
        BigDecimal("1e10")

    with pytest.raises(ValueError):
        BigDecimal(0.1)


def test_big_decimal_is_immutable():
    d = BigDecimal("1")

    with pytest.raises(FrozenInstanceError):
        d.value = "2"


def test_big_decimal_equality_and_hash_use_the_canonical_value():
    assert BigDecimal("1.0") == BigDecimal("1")
    assert hash(BigDecimal("1.0")) == hash(BigDecimal("1"))
    assert BigDecimal("1") != "1"


def test_big_decimal_arithmetic_returns_new_instances():
    # Given
    a = BigDecimal("1.5")

    # When
    total = a.add("2")

    # Then
    assert total == BigDecimal("3.5")
    assert a == BigDecimal("1.5")
    assert a.subtract(BigDecimal("2")) == BigDecimal("-0.5")
    assert a.multiply("4") == BigDecimal("6")
    assert BigDecimal("1").divide("3", 4) == BigDecimal("0.3333")
    assert BigDecimal("1").divide("8") == BigDecimal("0.125")


def test_big_decimal_operators():
    assert BigDecimal("1.5") + "2" == BigDecimal("3.5")
    assert "2" - BigDecimal("0.5") == BigDecimal("1.5")
    assert 3 * BigDecimal("0.5") == BigDecimal("1.5")
    assert -BigDecimal("2") == BigDecimal("-2")
    assert abs(BigDecimal("-2")) == BigDecimal("2")


def test_big_decimal_ordering():
    values = [BigDecimal("1.2"), BigDecimal("-3"), BigDecimal("1.10")]

    assert sorted(values) == [BigDecimal("-3"), BigDecimal("1.1"), BigDecimal("1.2")]
    assert BigDecimal("1.10") < BigDecimal("1.2")
    assert BigDecimal("2") >= BigDecimal("2.0")
    assert BigDecimal("2").compare_to("3") == -1


@pytest.mark.parametrize("other", ["1", 1, Decimal("1")])
def test_big_decimal_ordering_against_other_types_is_unsupported(other):
    with pytest.raises(TypeError):
        BigDecimal("1") <= other

    with pytest.raises(TypeError):
        other <= BigDecimal("1")

    with pytest.raises(TypeError):
        BigDecimal("1") < other

    assert BigDecimal("1").compare_to(other) == 0


def test_big_decimal_rounding():
    assert BigDecimal("-1.5").floor() == BigDecimal("-2")
    assert BigDecimal("-1.5").ceil() == BigDecimal("-1")
    assert BigDecimal("2.25").round(1, RoundingMode.HALF_UP) == BigDecimal("2.3")
    assert BigDecimal("2.25").round(1) == BigDecimal("2.2")


def test_big_decimal_powers_and_roots():
    assert BigDecimal("2").pow("10") == BigDecimal("1024")
    assert BigDecimal("2").pow("2", negate=True) == BigDecimal("-4")
    assert BigDecimal("2").pow("0.5", 10) == BigDecimal("1.4142135624")
    assert BigDecimal("16").sq_root() == BigDecimal("4")


def test_big_decimal_presentation():
    d = BigDecimal("-1234567.5")

    assert str(d) == "-1234567.5"
    assert d.get_value() == "-1234567.5"
    assert d.get_pretty_value() == "-1,234,567.5"
    assert d.get_pretty_value(3, ".") == "-1.234.567.5"
