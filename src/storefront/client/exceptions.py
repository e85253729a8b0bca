"""Client errors.

``ClientError`` carries a message meant for the customer; clients turn it into
an entry of their error list. The others signal a broken configuration.
"""

from shared.exceptions import ConfigurationError, ShopError


class ClientError(ShopError):
    """A user-facing error raised while processing a request."""


class InvalidName(ConfigurationError):
    """A client, decorator or path segment name is not alphanumeric."""


class ImplementationNotFound(ConfigurationError):
    """No implementation is registered under the requested name."""


class InterfaceMismatch(ConfigurationError):
    """A registered implementation does not implement the required interface."""


class TemplateNotFound(ConfigurationError):
    """No template is registered under the requested name."""
