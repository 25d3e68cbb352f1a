import pytest

from hotel_reservation.customer.applications import CustomerDirectory
from hotel_reservation.customer.domain.entity import Customer
from hotel_reservation.customer.infrastructure import InMemoryCustomerRepository
from hotel_reservation.shared.domain.exception import DuplicateResourceException


@pytest.fixture
def directory():
    return CustomerDirectory(repository=InMemoryCustomerRepository())


class TestCustomerDirectory:
    def test_add_customer_saves_to_repository(self, mock_repository):
        directory = CustomerDirectory(repository=mock_repository)

        customer = directory.add_customer("jane@example.com", "Jane", "Doe")

        assert isinstance(customer, Customer)
        mock_repository.save.assert_called_once_with(customer)

    def test_add_and_get_customer(self, directory):
        customer = directory.add_customer("jane@example.com", "Jane", "Doe")

        assert directory.get_customer("jane@example.com") == customer

    def test_duplicate_email_raises(self, directory):
        directory.add_customer("jane@example.com", "Jane", "Doe")

        with pytest.raises(DuplicateResourceException):
            directory.add_customer("jane@example.com", "Janet", "Doe")
        assert len(directory.get_all_customers()) == 1

    def test_invalid_email_raises(self, directory):
        with pytest.raises(ValueError, match="Invalid email address"):
            directory.add_customer("not-an-email", "Jane", "Doe")

    @pytest.mark.parametrize("email", [None, "", "unknown@example.com", "broken"])
    def test_get_missing_customer_returns_none(self, directory, email):
        assert directory.get_customer(email) is None

    def test_get_all_customers_in_registration_order(self, directory):
        directory.add_customer("b@example.com", "B", "Two")
        directory.add_customer("a@example.com", "A", "One")

        emails = [customer.email for customer in directory.get_all_customers()]

        assert emails == ["b@example.com", "a@example.com"]

    def test_reset(self, directory):
        directory.add_customer("jane@example.com", "Jane", "Doe")

        directory.reset()

        assert directory.get_all_customers() == []
