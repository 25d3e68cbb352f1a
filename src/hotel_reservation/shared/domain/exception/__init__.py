from .exceptions import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    InvalidArgumentException,
    ReservationConflictException,
)

__all__ = [
    "DomainException",
    "BusinessRuleViolationException",
    "ReservationConflictException",
    "DuplicateResourceException",
    "InvalidArgumentException",
]
