from typing import List

from core.errors import CustomerNotFoundError, DuplicateCustomerError
from customers.models import Customer
from utils.logger import get_logger

_logger = get_logger(__name__)


class AddressBook:
    """Customer records of the farm, in the order they were added."""

    def __init__(self) -> None:
        self._customers: List[Customer] = []

    def add_customer(self, customer: Customer) -> None:
        if customer in self._customers:
            raise DuplicateCustomerError(str(customer))
        self._customers.append(customer)
        _logger.info(f"Added customer {customer.name} ({customer.phone_number})")

    def get_all_records(self) -> List[Customer]:
        return list(self._customers)

    def contains_customer(self, customer: Customer) -> bool:
        return customer in self._customers

    def get_customer(self, name: str, phone_number: int) -> Customer:
        """
        Look up a customer by name and phone number.

        :raises CustomerNotFoundError: if no record matches.
        """
        for customer in self._customers:
            if customer.name == name and customer.phone_number == phone_number:
                return customer
        raise CustomerNotFoundError(f"No customer {name} with phone {phone_number}")
