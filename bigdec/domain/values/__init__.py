from .rounding_mode import RoundingMode

__all__ = [
    "RoundingMode",
]
