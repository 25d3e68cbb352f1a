from .logger import get_logger
from .validators import to_decimal

__all__ = ["get_logger", "to_decimal"]
