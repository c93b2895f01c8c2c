from .arithmetic import (
    BigDecimalError,
    ConvergenceError,
    InvalidArgumentError,
    UndefinedOperationError,
)
from .base import DomainException

__all__ = [
    "DomainException",
    "BigDecimalError",
    "ConvergenceError",
    "InvalidArgumentError",
    "UndefinedOperationError",
]
