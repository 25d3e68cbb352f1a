from dataclasses import dataclass
from datetime import date


def periods_overlap(
    check_in_a: date, check_out_a: date, check_in_b: date, check_out_b: date
) -> bool:
    """半開区間 [in, out) 同士が重なるかどうか

    チェックアウト日と次のチェックイン日が同じ場合は重ならない。
    """
    return check_in_a < check_out_b and check_in_b < check_out_a


@dataclass(frozen=True)
class StayPeriod:
    """滞在期間(チェックイン日 + チェックアウト日)"""

    check_in: date
    check_out: date

    def __post_init__(self) -> None:
        if self.check_out <= self.check_in:
            raise ValueError("Check-in date must precede check-out date")

    def nights(self) -> int:
        """宿泊数を計算する"""
        return (self.check_out - self.check_in).days

    def overlaps(self, check_in: date, check_out: date) -> bool:
        """指定した期間と重なるかどうか"""
        return periods_overlap(self.check_in, self.check_out, check_in, check_out)
