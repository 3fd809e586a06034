"""Customer repository adapter backed by the active Protean domain."""

from protean.utils.globals import current_domain

from identity.customer.customer import Customer
from identity.customer.ports import CustomerRepository


class DomainCustomerRepository(CustomerRepository):
    """Stores customers through ``current_domain.repository_for(Customer)``.

    Uses whichever provider the domain is configured with (in-memory by
    default). Must be called inside a domain context.
    """

    def get_customer(self, email_address: str) -> Customer | None:
        repo = current_domain.repository_for(Customer)
        results = repo._dao.query.filter(email_address=email_address).all()
        if not results or not results.items:
            return None
        return results.first

    def save_customer(self, customer: Customer) -> None:
        current_domain.repository_for(Customer).add(customer)
