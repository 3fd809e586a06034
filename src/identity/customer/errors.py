"""Registration failures.

Each error is a ``ValidationError`` keyed by the field at fault, so callers can
either catch the specific class or inspect ``messages`` the same way they do
for any other domain validation failure.
"""

from protean.exceptions import ValidationError


class RegistrationError(ValidationError):
    """Base class for everything ``RegisterNewCustomer.register`` rejects."""


class MissingRegistration(RegistrationError):
    def __init__(self):
        super().__init__({"registration": ["Customer registration is missing."]})


class MissingFirstName(RegistrationError):
    def __init__(self):
        super().__init__({"first_name": ["Missing first name."]})


class MissingLastName(RegistrationError):
    def __init__(self):
        super().__init__({"last_name": ["Missing last name."]})


class MissingEmailAddress(RegistrationError):
    def __init__(self):
        super().__init__({"email_address": ["Missing email address."]})


class InvalidEmailAddress(RegistrationError):
    def __init__(self, email_address: str):
        self.email_address = email_address
        super().__init__({"email_address": [f"Invalid email address: {email_address!r}"]})


class DuplicateCustomer(RegistrationError):
    def __init__(self, email_address: str):
        self.email_address = email_address
        super().__init__({"email_address": [f"A customer with email address {email_address} already exists."]})


class WelcomeMessageNotSent(RuntimeError):
    """The welcome email could not be dispatched."""

    def __init__(self, customer_id: str, reason: str):
        self.customer_id = customer_id
        self.reason = reason
        super().__init__(f"Welcome message to customer {customer_id} was not sent: {reason}")
