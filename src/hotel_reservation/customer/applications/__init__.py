from .customer_directory import CustomerDirectory

__all__ = ["CustomerDirectory"]
