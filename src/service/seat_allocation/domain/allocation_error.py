"""Seat allocation errors"""

from src.platform.exception.exceptions import DomainError


class InvalidRequestError(DomainError):
    """Non-positive count, or a reference to an unknown class, row or seat"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class InsufficientAvailabilityError(DomainError):
    """No allocation phase could satisfy the requested count"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class InvalidLayoutError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 422)
