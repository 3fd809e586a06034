"""In-memory email channel for development and tests."""

from uuid import uuid4

from identity.channel.email_port import EmailPort

DEFAULT_FAILURE = "Email delivery failed"


class FakeEmailAdapter(EmailPort):
    """Keeps every accepted message in ``sent_emails``; ``configure`` makes it refuse them."""

    def __init__(self):
        self.sent_emails: list[dict] = []
        self.should_succeed = True
        self.failure_reason = DEFAULT_FAILURE

    def configure(self, should_succeed: bool = True, failure_reason: str = DEFAULT_FAILURE):
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def send(self, to: str, subject: str, body: str) -> dict:
        if not self.should_succeed:
            return {"message_id": None, "status": "failed", "error": self.failure_reason}

        message = {"message_id": f"email-{uuid4().hex[:12]}", "to": to, "subject": subject, "body": body}
        self.sent_emails.append(message)
        return {"message_id": message["message_id"], "status": "sent"}

    def reset(self):
        self.sent_emails.clear()
        self.configure()
