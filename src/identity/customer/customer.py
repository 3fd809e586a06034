"""Customer aggregate root."""

from uuid import uuid4

from protean.fields import String, Text

from identity.domain import identity


def new_customer_id() -> str:
    """Default identity source for newly registered customers."""
    return str(uuid4())


@identity.aggregate
class Customer:
    """A registered person on the platform.

    Customers are only ever created from a validated ``CustomerRegistration``
    and are not changed afterwards. The email address is unique across all
    customers; the registration use case checks it before saving.
    """

    first_name: Text(required=True, sanitize=False)
    last_name: Text(required=True, sanitize=False)
    email_address: String(required=True, max_length=254, unique=True, sanitize=False)
