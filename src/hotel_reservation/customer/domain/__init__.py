from .entity import Customer
from .repository import CustomerRepository
from .value_object import EmailAddress

__all__ = ["Customer", "CustomerRepository", "EmailAddress"]
