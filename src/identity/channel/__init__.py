"""Email channel registry.

Hands out one email adapter per process. Only the in-memory fake ships with
the project; a real provider adapter is swapped in with ``set_email_channel``.
"""

from identity.channel.email_port import EmailPort

_email_channel: EmailPort | None = None


def get_email_channel() -> EmailPort:
    """Return the configured email adapter, creating the fake one on first use."""
    global _email_channel
    if _email_channel is None:
        from identity.channel.fake_email import FakeEmailAdapter

        _email_channel = FakeEmailAdapter()
    return _email_channel


def set_email_channel(adapter: EmailPort) -> None:
    global _email_channel
    _email_channel = adapter


def reset_channels() -> None:
    """Forget the current adapter (useful for testing)."""
    global _email_channel
    _email_channel = None
