from .email_address import EmailAddress

__all__ = ["EmailAddress"]
