from hotel_reservation.customer.domain.value_object import EmailAddress
from hotel_reservation.shared.domain import Entity


class Customer(Entity[EmailAddress]):
    """顧客エンティティ（メールアドレスで一意）"""

    def __init__(self, id: EmailAddress, first_name: str, last_name: str) -> None:
        if not first_name or not first_name.strip():
            raise ValueError("First name cannot be empty")
        if not last_name or not last_name.strip():
            raise ValueError("Last name cannot be empty")
        super().__init__(id)
        self._first_name = first_name.strip()
        self._last_name = last_name.strip()

    @property
    def email(self) -> str:
        return str(self.id)

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name
