from .validators import DecimalLike, validate_decimal


def get_pretty_value(
    value: DecimalLike, digits: int = 3, separator: str = ","
) -> str:
    """
    Group the integer digits of a value for display.

    :param value: Decimal value
    :param digits: Group size, counted from the separator leftwards
    :param separator: Group separator

    :return: e.g. "-1234567.891" -> "-1,234,567.891"
    """
    if digits < 1:
        raise ValueError(f"Group size must be positive: {digits}")

    text = validate_decimal(value)
    sign = "-" if text.startswith("-") else ""
    integer_part, dot, fraction_part = text.lstrip("-").partition(".")

    head = len(integer_part) % digits or digits
    groups = [integer_part[:head]]
    groups.extend(
        integer_part[i : i + digits] for i in range(head, len(integer_part), digits)
    )

    return sign + separator.join(groups) + dot + fraction_part
