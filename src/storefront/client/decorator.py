"""Client decorator base.

A decorator wraps the next inner client and forwards every call it does not
intercept, unknown attributes included. Decorators only override the steps
they change.
"""

from storefront.client.base import Client
from storefront.view import View


class ClientDecorator(Client):
    def __init__(self, client: Client, context):
        self._client = client
        self.context = context

    def __getattr__(self, name):
        if name == "_client":
            raise AttributeError(name)
        return getattr(self._client, name)

    def init(self, view: View) -> View:
        return self._client.init(view)

    def data(self, view: View) -> View:
        return self._client.data(view)

    def header(self, view: View, uid: str = "") -> str | None:
        return self._client.header(view, uid)

    def body(self, view: View, uid: str = "") -> str:
        return self._client.body(view, uid)

    def get_sub_client(self, type_: str, name: str | None = None) -> Client:
        return self._client.get_sub_client(type_, name)

    def set_object(self, client: Client) -> Client:
        self._client.set_object(client)
        return self

    @property
    def inner(self) -> Client:
        return self._client
