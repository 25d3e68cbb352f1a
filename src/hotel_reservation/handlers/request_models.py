from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator, model_validator

from hotel_reservation.reservation.domain.enum import RoomType
from hotel_reservation.shared.config import DATE_FORMAT
from hotel_reservation.shared.utils.validators import to_decimal


def parse_date(v: object) -> date:
    """メニューで入力された日付文字列を date に変換する"""
    if isinstance(v, date):
        return v
    try:
        return datetime.strptime(str(v).strip(), DATE_FORMAT).date()
    except ValueError as e:
        raise ValueError(f"Invalid date: {v!r}") from e


class DateInput(BaseModel):
    """日付1件の入力モデル（MM/DD/YYYY形式）"""

    value: date

    @field_validator("value", mode="before")
    @classmethod
    def convert_to_date(cls, v: object) -> date:
        return parse_date(v)


class StayRequest(BaseModel):
    """空室検索のリクエストモデル"""

    check_in_date: date = Field(..., description="チェックイン日")
    check_out_date: date = Field(..., description="チェックアウト日")

    @field_validator("check_in_date", "check_out_date", mode="before")
    @classmethod
    def convert_to_date(cls, v: object) -> date:
        return parse_date(v)

    @model_validator(mode="after")
    def check_order(self) -> "StayRequest":
        if self.check_out_date <= self.check_in_date:
            raise ValueError("Check-in date must precede check-out date")
        return self


class AddRoomRequest(BaseModel):
    """部屋追加のリクエストモデル"""

    room_number: str = Field(..., min_length=1, max_length=20, description="部屋番号")
    price_amount: Decimal = Field(..., ge=0, description="一泊あたりの料金")
    room_type: RoomType = Field(..., description="1: シングル / 2: ダブル")

    @field_validator("room_number", mode="before")
    @classmethod
    def strip_room_number(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("price_amount", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v: object) -> Decimal:
        return to_decimal(v)

    @field_validator("room_type", mode="before")
    @classmethod
    def convert_label_to_room_type(cls, v: object) -> object:
        if isinstance(v, str) and not isinstance(v, RoomType):
            try:
                return RoomType.from_label(v)
            except ValueError:
                return v.strip().upper()
        return v


class CreateCustomerRequest(BaseModel):
    """アカウント作成のリクエストモデル"""

    email: str = Field(..., min_length=1, examples=["name@domain.com"])
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)

    @field_validator("email", "first_name", "last_name", mode="before")
    @classmethod
    def strip_text(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v
