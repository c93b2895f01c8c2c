import pytest
from bigdec.domain.services import get_pretty_value


def test_pretty_value_groups_integer_digits():
    assert get_pretty_value("1234567.891") == "1,234,567.891"
    assert get_pretty_value("-1234") == "-1,234"
    assert get_pretty_value("123") == "123"
    assert get_pretty_value("0.12345") == "0.12345"


def test_pretty_value_custom_group_and_separator():
    assert get_pretty_value("12345678", 4, " ") == "1234 5678"
    assert get_pretty_value("123456", 2, "'") == "12'34'56"


def test_pretty_value_rejects_empty_groups():
    with pytest.raises(ValueError):
        get_pretty_value("1234", 0)
