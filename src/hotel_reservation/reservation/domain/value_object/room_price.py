from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class RoomPrice:
    """一泊あたりの料金"""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Room price cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"

    def is_free(self) -> bool:
        return self.amount == 0
