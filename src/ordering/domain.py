"""Ordering bounded context — Shopping Cart.

Holds the in-memory shopping cart aggregate: line items keyed by product,
quantity merging on repeat adds, and a decimal total.
"""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
