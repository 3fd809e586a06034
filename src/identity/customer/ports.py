"""Collaborators the registration use case consumes but never implements."""

from abc import ABC, abstractmethod

from identity.customer.customer import Customer


class CustomerRepository(ABC):
    """Where registered customers are looked up and stored."""

    @abstractmethod
    def get_customer(self, email_address: str) -> Customer | None:
        """Return the customer owning ``email_address``, or None."""
        ...

    @abstractmethod
    def save_customer(self, customer: Customer) -> None:
        """Persist a new customer. Storage failures propagate to the caller."""
        ...


class CustomerNotifier(ABC):
    """Sends messages to customers."""

    @abstractmethod
    def send_welcome_message(self, customer: Customer) -> None: ...
