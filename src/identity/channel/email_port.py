"""Outbound email port used for customer-facing messages."""

from abc import ABC, abstractmethod


class EmailPort(ABC):
    """Plain-text email dispatch to a single recipient."""

    @abstractmethod
    def send(self, to: str, subject: str, body: str) -> dict:
        """Dispatch one message to ``to``.

        Adapters report delivery problems in the result instead of raising:
        ``{"message_id": ..., "status": "sent" | "failed", "error": ...}``.
        """
        ...
