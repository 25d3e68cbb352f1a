from .entity import Entity
from .exception import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    InvalidArgumentException,
    ReservationConflictException,
)
from .repository import Repository

__all__ = [
    "Entity",
    "Repository",
    "DomainException",
    "BusinessRuleViolationException",
    "ReservationConflictException",
    "DuplicateResourceException",
    "InvalidArgumentException",
]
