"""Welcome notifier — emails newly registered customers."""

import structlog

from identity.channel.email_port import EmailPort
from identity.customer.customer import Customer
from identity.customer.errors import WelcomeMessageNotSent
from identity.customer.ports import CustomerNotifier

logger = structlog.get_logger(__name__)

WELCOME_SUBJECT = "Welcome to Shopfront"


def render_welcome_body(customer: Customer) -> str:
    return (
        f"Hi {customer.first_name},\n\n"
        "Thanks for signing up. Your account is ready and you can start shopping right away.\n"
    )


class EmailWelcomeNotifier(CustomerNotifier):
    """Sends the welcome message through an ``EmailPort``.

    A failed dispatch raises ``WelcomeMessageNotSent`` so the caller decides
    whether to retry or compensate.
    """

    def __init__(self, channel: EmailPort):
        self.channel = channel

    def send_welcome_message(self, customer: Customer) -> None:
        result = self.channel.send(
            to=customer.email_address,
            subject=WELCOME_SUBJECT,
            body=render_welcome_body(customer),
        )

        if result.get("status") != "sent":
            reason = result.get("error", "Unknown dispatch error")
            logger.warning(
                "Welcome email dispatch failed",
                customer_id=str(customer.id),
                error=reason,
            )
            raise WelcomeMessageNotSent(str(customer.id), reason)

        logger.info(
            "Welcome email sent",
            customer_id=str(customer.id),
            message_id=result.get("message_id"),
        )
