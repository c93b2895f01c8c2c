from .base import DomainException


class BigDecimalError(DomainException):
    """Base exception for decimal arithmetic errors."""

    pass


class InvalidArgumentError(BigDecimalError, ValueError):
    """Raised when an argument is malformed or not of the required kind."""

    def __init__(self, label: str, reason: str):
        self.label = label

        super().__init__(f"Invalid {label}: {reason}")


class UndefinedOperationError(BigDecimalError, ArithmeticError):
    """Raised for mathematically undefined operations, e.g. 0^(-1)."""

    def __init__(self, reason: str):
        super().__init__(reason)


class ConvergenceError(BigDecimalError):
    """Raised when an iterative solver exhausts its iteration budget."""

    def __init__(self, operation: str, iterations: int):
        self.operation = operation
        self.iterations = iterations

        super().__init__(
            f"{operation} did not converge within {iterations} iterations"
        )
