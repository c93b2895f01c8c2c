import re
from decimal import Decimal
from typing import TYPE_CHECKING, Union

from bigdec.domain.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from bigdec.domain.models import BigDecimal

DecimalLike = Union[str, int, Decimal, "BigDecimal"]

# Plain fixed-point notation only; exponent notation is rejected.
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


def _canonical(text: str) -> str:
    negative = text.startswith("-")
    text = text.lstrip("+-")

    integer_part, _, fraction_part = text.partition(".")
    integer_part = integer_part.lstrip("0") or "0"
    fraction_part = fraction_part.rstrip("0")

    result = f"{integer_part}.{fraction_part}" if fraction_part else integer_part

    if negative and result != "0":
        return "-" + result

    return result


def validate_decimal(value: DecimalLike, label: str = "value") -> str:
    """
    Validate a decimal operand and return its canonical text.

    Accepts strings in plain fixed-point notation, ints, finite
    ``decimal.Decimal`` instances and anything exposing ``get_value()``
    (e.g. ``BigDecimal``). Floats and booleans are rejected, since they
    would smuggle binary rounding into exact arithmetic.

    :param value: Value to validate
    :param label: Name used in the error message

    :return: Canonical text, no leading '+', no redundant zeros, never '-0'

    :raises InvalidArgumentError: if the value is not a plain decimal number
    """
    if isinstance(value, (bool, float)):
        raise InvalidArgumentError(
            label, f"expected a decimal string, got {type(value).__name__} {value!r}"
        )

    if isinstance(value, int):
        return str(value)

    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidArgumentError(label, f"{value} is not a finite number")
        return _canonical(format(value, "f"))

    if not isinstance(value, str) and callable(getattr(value, "get_value", None)):
        value = value.get_value()

    if not isinstance(value, str):
        raise InvalidArgumentError(
            label, f"unsupported type {type(value).__name__}"
        )

    if not _DECIMAL_PATTERN.fullmatch(value):
        raise InvalidArgumentError(label, f"'{value}' is not a decimal number")

    return _canonical(value)


def validate_integer(value: DecimalLike, label: str = "value") -> str:
    """
    Validate that a value is integer-valued ("4" and "4.000" both pass).

    :return: Canonical text of the integer
    :raises InvalidArgumentError: if the value has a non-zero fractional part
    """
    text = validate_decimal(value, label)

    if "." in text:
        raise InvalidArgumentError(label, f"{text} is not an integer")

    return text
