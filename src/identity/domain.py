"""Identity bounded context — customer registration."""

from protean.domain import Domain

from identity.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
identity = Domain(name="identity")
