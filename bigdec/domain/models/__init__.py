from .big_decimal import BigDecimal

__all__ = [
    "BigDecimal",
]
