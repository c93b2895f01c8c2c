from bigdec.domain.exceptions import (
    BigDecimalError,
    ConvergenceError,
    DomainException,
    InvalidArgumentError,
    UndefinedOperationError,
)
from bigdec.domain.models import BigDecimal
from bigdec.domain.services import (
    bisection_root,
    cb_root,
    int_pow,
    inverse_sq_root,
    nth_root,
    pow,
    root4,
    root5,
    root10,
    sq_root,
)
from bigdec.domain.values import RoundingMode

__all__ = [
    "BigDecimal",
    "BigDecimalError",
    "ConvergenceError",
    "DomainException",
    "InvalidArgumentError",
    "RoundingMode",
    "UndefinedOperationError",
    "bisection_root",
    "cb_root",
    "int_pow",
    "inverse_sq_root",
    "nth_root",
    "pow",
    "root4",
    "root5",
    "root10",
    "sq_root",
]
