"""Mail adapter registry — pluggable transports for transactional e-mail.

Provides singleton access to mail adapters. The fake adapter is the default;
a real transport is selected with ``notifications/mail/adapter`` in the
configuration once one is registered here.
"""

_mailer_instances: dict[str, object] = {}


def get_mailer(adapter: str = "fake"):
    """Return the configured mail adapter (singleton per adapter name).

    Args:
        adapter: Adapter name, currently only "fake"
    """
    if adapter not in _mailer_instances:
        if adapter == "fake":
            from notifications.channel.fake_email import FakeEmailAdapter

            _mailer_instances[adapter] = FakeEmailAdapter()
        else:
            raise ValueError(f"Unknown mail adapter: {adapter}")

    return _mailer_instances[adapter]


def reset_mailers():
    """Reset all mail adapter singletons (useful for testing)."""
    _mailer_instances.clear()
