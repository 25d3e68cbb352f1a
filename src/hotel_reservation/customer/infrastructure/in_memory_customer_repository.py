from hotel_reservation.customer.domain.entity import Customer
from hotel_reservation.customer.domain.repository import CustomerRepository
from hotel_reservation.customer.domain.value_object import EmailAddress
from hotel_reservation.shared.domain.exception import DuplicateResourceException


class InMemoryCustomerRepository(CustomerRepository):
    """プロセス内の dict を使用した CustomerRepository の具象実装"""

    def __init__(self) -> None:
        self._customers: dict[EmailAddress, Customer] = {}

    def save(self, customer: Customer) -> None:
        if customer.id in self._customers:
            raise DuplicateResourceException(
                f"Customer already exists: {customer.email}"
            )
        self._customers[customer.id] = customer

    def find_by_id(self, email: EmailAddress) -> Customer | None:
        return self._customers.get(email)

    def find_all(self) -> list[Customer]:
        return list(self._customers.values())

    def clear(self) -> None:
        self._customers.clear()
