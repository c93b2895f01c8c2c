from .validators import DecimalLike, validate_decimal, validate_integer


def int_pow(base: DecimalLike, exponent: DecimalLike) -> str:
    """
    Raise a decimal to an integer power, exactly.

    Only the magnitude of the exponent is used; reciprocals of negative
    exponents are handled by ``pow``. The decimal separator is taken out,
    the integer is raised natively and the separator is put back
    ``fraction_digits * exponent`` places from the right.

    :param base: Decimal base
    :param exponent: Integer-valued exponent

    :return: base ** |exponent|, without any rounding

    :raises InvalidArgumentError: if the exponent is not integer-valued
    """
    magnitude = abs(int(validate_integer(exponent, "int_pow exponent")))
    base = validate_decimal(base, "int_pow base")

    sign = ""
    if base.startswith("-"):
        base = base[1:]
        sign = "-" if magnitude % 2 else ""

    integer_part, _, fraction_part = base.partition(".")
    scale = len(fraction_part) * magnitude

    digits = str(int(integer_part + fraction_part) ** magnitude)

    if scale:
        digits = digits.rjust(scale + 1, "0")
        digits = digits[:-scale] + "." + digits[-scale:]

    return sign + digits
