from hotel_reservation.customer.domain.entity import Customer
from hotel_reservation.customer.domain.repository import CustomerRepository
from hotel_reservation.customer.domain.value_object import EmailAddress
from hotel_reservation.shared.utils.logger import get_logger

logger = get_logger()


class CustomerDirectory:
    """顧客の登録・検索のユースケース"""

    def __init__(self, repository: CustomerRepository) -> None:
        self._repository = repository

    def add_customer(self, email: str, first_name: str, last_name: str) -> Customer:
        """顧客を登録する

        メールアドレスや氏名が不正なら ValueError、
        登録済みのメールアドレスなら DuplicateResourceException を送出する。
        """
        customer = Customer(
            id=EmailAddress(email), first_name=first_name, last_name=last_name
        )
        self._repository.save(customer)
        logger.info("Customer created", extra={"email": customer.email})
        return customer

    def get_customer(self, email: str | None) -> Customer | None:
        if email is None:
            return None
        try:
            address = EmailAddress(email)
        except ValueError:
            return None
        return self._repository.find_by_id(address)

    def get_all_customers(self) -> list[Customer]:
        return self._repository.find_all()

    def reset(self) -> None:
        self._repository.clear()
