class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class ReservationConflictException(BusinessRuleViolationException):
    """同じ部屋の予約期間が重複する場合"""

    def __init__(
        self, message: str = "Room is already booked for the selected period"
    ) -> None:
        super().__init__(message)


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（同じキーで登録済みの場合）"""

    pass


class InvalidArgumentException(DomainException):
    """必須の引数が欠けている、または不正な場合

    argument には問題のあった引数名 (customer / room / dates) が入る。
    """

    def __init__(self, argument: str, message: str | None = None) -> None:
        self.argument = argument
        super().__init__(message or f"{argument} cannot be None")
