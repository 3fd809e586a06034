from decimal import Decimal

import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield


@pytest.fixture
def apple():
    from ordering.cart.cart import Product

    return Product.create(1, "Apple", Decimal("0.35"))


@pytest.fixture
def banana():
    from ordering.cart.cart import Product

    return Product.create(2, "Banana", Decimal("0.75"))


@pytest.fixture
def donut():
    from ordering.cart.cart import Product

    return Product.create(3, "Donut", Decimal("2.5"))
