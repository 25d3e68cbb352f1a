from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class ReservationId:
    """予約ID

    同じ部屋・同じ日付の予約であっても、別の予約として区別するために使う。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("ReservationId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> ReservationId:
        return cls(value=f"reservation_{uuid.uuid4().hex}")
