from abc import abstractmethod

from hotel_reservation.customer.domain.entity.customer import Customer
from hotel_reservation.customer.domain.value_object.email_address import EmailAddress
from hotel_reservation.shared.domain import Repository


class CustomerRepository(Repository[Customer, EmailAddress]):
    """顧客レポジトリのインターフェース"""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """顧客を登録する

        同じメールアドレスが登録済みなら DuplicateResourceException を送出する。
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, email: EmailAddress) -> Customer | None:
        """メールアドレスで検索する"""
        raise NotImplementedError
