"""Customer registration — request value object, use case, command and handler."""

from collections.abc import Callable

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Text

from identity.channel import get_email_channel
from identity.customer.customer import Customer, new_customer_id
from identity.customer.errors import (
    DuplicateCustomer,
    InvalidEmailAddress,
    MissingEmailAddress,
    MissingFirstName,
    MissingLastName,
    MissingRegistration,
)
from identity.customer.ports import CustomerNotifier, CustomerRepository
from identity.customer.repository import DomainCustomerRepository
from identity.customer.welcome import EmailWelcomeNotifier
from identity.domain import identity
from identity.shared.email import EmailAddress

logger = structlog.get_logger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@identity.value_object
class CustomerRegistration:
    """What a prospective customer filled in on the sign-up form.

    Every field is optional here so that ``validate`` can report exactly which
    one is missing, in form order.
    """

    first_name: Text(sanitize=False)
    last_name: Text(sanitize=False)
    email_address: Text(sanitize=False)

    @property
    def normalized_email_address(self) -> str | None:
        """The email address without surrounding whitespace, as it is checked and stored."""
        return self.email_address.strip() if self.email_address is not None else None

    def validate(self) -> None:
        """Raise the first problem found, checking fields in form order."""
        if _is_blank(self.first_name):
            raise MissingFirstName()
        if _is_blank(self.last_name):
            raise MissingLastName()
        if _is_blank(self.email_address):
            raise MissingEmailAddress()

        try:
            EmailAddress(address=self.normalized_email_address)
        except (ValidationError, ValueError):
            raise InvalidEmailAddress(self.normalized_email_address) from None

    def to_customer(self, id_generator: Callable[[], str] | None = None) -> Customer:
        generate_id = id_generator or new_customer_id
        return Customer(
            id=generate_id(),
            first_name=self.first_name,
            last_name=self.last_name,
            email_address=self.normalized_email_address,
        )


class RegisterNewCustomer:
    """Registers a customer and welcomes them.

    Steps run in a fixed order and stop at the first failure: field
    validation, duplicate lookup by email address, customer creation,
    ``save_customer``, ``send_welcome_message``. Nothing is saved or sent when
    validation or the duplicate check fails. Repository and notifier errors
    are not caught.
    """

    def __init__(
        self,
        repository: CustomerRepository,
        notifier: CustomerNotifier,
        id_generator: Callable[[], str] | None = None,
    ):
        self.repository = repository
        self.notifier = notifier
        self.id_generator = id_generator or new_customer_id

    def register(self, registration: CustomerRegistration | None) -> Customer:
        self._validate(registration)

        customer = registration.to_customer(self.id_generator)
        self.repository.save_customer(customer)
        self.notifier.send_welcome_message(customer)

        logger.info("Customer registered", customer_id=str(customer.id))
        return customer

    def _validate(self, registration: CustomerRegistration | None) -> None:
        if registration is None:
            raise MissingRegistration()

        registration.validate()

        existing = self.repository.get_customer(registration.normalized_email_address)
        if existing is not None:
            logger.info("Duplicate registration rejected", existing_customer_id=str(existing.id))
            raise DuplicateCustomer(registration.normalized_email_address)


@identity.command(part_of="Customer")
class RegisterCustomer:
    """Sign up a new customer from the registration form."""

    first_name: Text(sanitize=False)
    last_name: Text(sanitize=False)
    email_address: Text(sanitize=False)


@identity.command_handler(part_of=Customer)
class RegisterCustomerHandler:
    @handle(RegisterCustomer)
    def register_customer(self, command):
        use_case = RegisterNewCustomer(
            repository=DomainCustomerRepository(),
            notifier=EmailWelcomeNotifier(get_email_channel()),
        )
        customer = use_case.register(
            CustomerRegistration(
                first_name=command.first_name,
                last_name=command.last_name,
                email_address=command.email_address,
            )
        )
        return str(customer.id)
