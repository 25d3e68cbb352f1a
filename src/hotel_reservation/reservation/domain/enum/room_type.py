from __future__ import annotations

from enum import Enum


class RoomType(str, Enum):
    """部屋タイプ

    メニューでは "1" (シングル) / "2" (ダブル) のラベルで選択する。
    """

    SINGLE = "SINGLE"
    DOUBLE = "DOUBLE"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> RoomType:
        """メニューのラベルから部屋タイプを取得する"""
        for room_type, room_label in _LABELS.items():
            if room_label == label.strip():
                return room_type
        raise ValueError(f"Unknown room type label: {label!r}")


_LABELS = {RoomType.SINGLE: "1", RoomType.DOUBLE: "2"}
