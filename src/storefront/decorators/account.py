"""Decorators for the customer account clients."""

from storefront.client.decorator import ClientDecorator
from storefront.client.factory import register_decorator
from storefront.view import View


@register_decorator("account/favorite", "account/review")
class Login(ClientDecorator):
    """Renders nothing unless a customer is logged in."""

    def init(self, view: View) -> View:
        if not view.context.user_id:
            return view
        return self._client.init(view)

    def data(self, view: View) -> View:
        if not view.context.user_id:
            return view
        return self._client.data(view)

    def header(self, view: View, uid: str = "") -> str | None:
        if not view.context.user_id:
            return None
        return self._client.header(view, uid)

    def body(self, view: View, uid: str = "") -> str:
        if not view.context.user_id:
            return ""
        return self._client.body(view, uid)
