"""Error taxonomy shared by all ShopWindow contexts.

Per-order job failures (data integrity, delivery) are caught and logged at the
job's per-order boundary. Configuration errors propagate to whoever asked for
the misconfigured object.
"""


class ShopError(Exception):
    """Base class for errors raised by ShopWindow code."""


class ConfigurationError(ShopError):
    """Invalid or unresolvable configuration (names, implementations, templates)."""


class DataIntegrityError(ShopError):
    """Stored data is missing a part that processing requires."""


class TransientDeliveryError(ShopError):
    """A message could not be handed to its transport; retrying may succeed."""
