from dataclasses import dataclass


@dataclass(frozen=True)
class RoomNumber:
    """部屋番号"""

    value: str

    def __post_init__(self) -> None:
        if not self.value or len(self.value.strip()) == 0:
            raise ValueError("Room number cannot be empty")
        if len(self.value) > 20:
            raise ValueError("Room number is too long (max 20 characters)")
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        return self.value
