import pytest
from identity.channel import reset_channels
from identity.customer.customer import Customer
from identity.customer.ports import CustomerNotifier, CustomerRepository
from protean import current_domain
from protean.integrations.pytest import DomainFixture


class RecordingCustomerRepository(CustomerRepository):
    """Returns a preset customer from every lookup and remembers what it was asked."""

    def __init__(self, existing: Customer | None = None):
        self.existing = existing
        self.looked_up: list[str] = []
        self.saved: list[Customer] = []

    def get_customer(self, email_address):
        self.looked_up.append(email_address)
        return self.existing

    def save_customer(self, customer):
        self.saved.append(customer)


class RecordingCustomerNotifier(CustomerNotifier):
    def __init__(self):
        self.welcomed: list[Customer] = []

    def send_welcome_message(self, customer):
        self.welcomed.append(customer)


@pytest.fixture(scope="session")
def identity_bed():
    from identity.domain import identity

    bed = DomainFixture(identity)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(identity_bed):
    with identity_bed.domain_context():
        yield

        for _, provider in current_domain.providers.items():
            provider._data_reset()

    reset_channels()


@pytest.fixture
def repository():
    return RecordingCustomerRepository()


@pytest.fixture
def notifier():
    return RecordingCustomerNotifier()


@pytest.fixture
def existing_customer():
    return Customer(first_name="Fred", last_name="Flintstone", email_address="fred.flintstone@gmail.com")


@pytest.fixture
def repository_with_existing(existing_customer):
    return RecordingCustomerRepository(existing=existing_customer)
