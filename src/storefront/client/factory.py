"""Client factory — builds clients and their decorator chains from configuration.

Implementations register under a client path and a name::

    @register_client("account/favorite")
    class FavoriteClient(BaseClient): ...

``create_client(context, "account/favorite")`` instantiates the implementation
named by ``client/html/account/favorite/name`` (default ``Standard``) and wraps
it, innermost first, in

1. the ``client/html/common/decorators/default`` decorators, minus the names in
   ``client/html/<path>/decorators/excludes``,
2. the ``client/html/<path>/decorators/global`` decorators,
3. the ``client/html/<path>/decorators/local`` decorators.

Default and global decorators come from the common namespace; local ones are
registered for the client path itself. Names must be ASCII alphanumeric.
"""

import re

import structlog

from shared.context import Context
from storefront.client.base import Client
from storefront.client.decorator import ClientDecorator
from storefront.client.exceptions import ImplementationNotFound, InterfaceMismatch, InvalidName

logger = structlog.get_logger(__name__)

COMMON_NAMESPACE = "common"
DEFAULT_NAME = "Standard"

_VALID_NAME = re.compile(r"[A-Za-z0-9]+")

CLIENT_REGISTRY: dict[tuple[str, str], type] = {}
DECORATOR_REGISTRY: dict[tuple[str, str], type] = {}


def register_client(path: str, name: str = DEFAULT_NAME):
    def wrapper(cls):
        CLIENT_REGISTRY[(path, name)] = cls
        return cls

    return wrapper


def register_decorator(*namespaces: str, name: str | None = None):
    def wrapper(cls):
        for namespace in namespaces or (COMMON_NAMESPACE,):
            DECORATOR_REGISTRY[(namespace, name or cls.__name__)] = cls
        return cls

    return wrapper


def validate_name(name, kind: str = "class") -> None:
    if not isinstance(name, str) or not _VALID_NAME.fullmatch(name):
        raise InvalidName(f'Invalid characters in {kind} name "{name}"')


def create_client(context: Context, path: str, name: str | None = None) -> Client:
    """Create the client registered for ``path``, decorated as configured."""
    if name is None:
        name = context.config.get(f"client/html/{path}/name", DEFAULT_NAME)

    for segment in path.split("/"):
        validate_name(segment, "client path")
    validate_name(name)

    cls = CLIENT_REGISTRY.get((path, name))
    if cls is None:
        raise ImplementationNotFound(f'Class "{name}" not available for client "{path}"')
    if not (isinstance(cls, type) and issubclass(cls, Client)):
        raise InterfaceMismatch(f'Class "{cls!r}" does not implement the client interface')

    client = add_client_decorators(context, cls(context), path)
    return client.set_object(client)


def add_client_decorators(context: Context, client: Client, path: str) -> Client:
    config = context.config

    excludes = set(config.get(f"client/html/{path}/decorators/excludes", []))
    defaults = [name for name in config.get("client/html/common/decorators/default", []) if name not in excludes]
    client = _add_decorators(context, client, defaults, COMMON_NAMESPACE)

    client = _add_decorators(
        context, client, config.get(f"client/html/{path}/decorators/global", []), COMMON_NAMESPACE
    )
    client = _add_decorators(context, client, config.get(f"client/html/{path}/decorators/local", []), path)

    return client


def _add_decorators(context: Context, client: Client, names: list, namespace: str) -> Client:
    for name in names:
        validate_name(name, "decorator")

        cls = DECORATOR_REGISTRY.get((namespace, name))
        if cls is None:
            raise ImplementationNotFound(f'Decorator "{name}" not available for "{namespace}"')
        if not (isinstance(cls, type) and issubclass(cls, ClientDecorator)):
            raise InterfaceMismatch(f'Decorator "{name}" does not implement the client decorator interface')

        client = cls(client, context)
        logger.debug("Client decorator added", decorator=name, namespace=namespace)

    return client
