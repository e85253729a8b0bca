"""Decorators of the common namespace, usable with every client."""

import structlog

from storefront.client.decorator import ClientDecorator
from storefront.client.exceptions import ClientError
from storefront.client.factory import register_decorator
from storefront.view import View

logger = structlog.get_logger(__name__)

NON_RECOVERABLE = "A non-recoverable error occured"


@register_decorator()
class Example(ClientDecorator):
    """Pass-through decorator, a starting point for custom ones."""


@register_decorator()
class Exceptions(ClientDecorator):
    """Logs errors raised while rendering and hides the section instead."""

    def _client_path(self) -> str:
        return getattr(self._client, "path", "")

    def init(self, view: View) -> View:
        try:
            return self._client.init(view)
        except ClientError as exc:
            return view.with_error("client_errors", str(exc))
        except Exception:
            logger.exception("Client processing failed", client=self._client_path())
            return view.with_error("client_errors", view.translate("client", NON_RECOVERABLE))

    def data(self, view: View) -> View:
        try:
            return self._client.data(view)
        except Exception:
            logger.exception("Client data failed", client=self._client_path())
            return view.with_error("client_errors", view.translate("client", NON_RECOVERABLE))

    def header(self, view: View, uid: str = "") -> str | None:
        try:
            return self._client.header(view, uid)
        except Exception:
            logger.exception("Client header rendering failed", client=self._client_path())
            return None

    def body(self, view: View, uid: str = "") -> str:
        try:
            return self._client.body(view, uid)
        except Exception:
            logger.exception("Client body rendering failed", client=self._client_path())
            return ""
