"""Client interface and the base implementation shared by all clients.

A client renders one section of a page (or of an e-mail). Rendering happens in
four steps, each taking the immutable ``View``:

- ``init(view)`` processes request input and returns a view with its outcome
- ``data(view)`` returns a view enriched with the values the templates need
- ``header(view)`` returns markup for the page head
- ``body(view)`` returns markup for the page body

A client may consist of sub-clients listed in ``client/html/<path>/subparts``.
Every step runs the client's own work first and then the sub-clients in the
configured order.
"""

from abc import ABC, abstractmethod

from storefront.view import View


class Client(ABC):
    @abstractmethod
    def init(self, view: View) -> View: ...

    @abstractmethod
    def data(self, view: View) -> View: ...

    @abstractmethod
    def header(self, view: View, uid: str = "") -> str | None: ...

    @abstractmethod
    def body(self, view: View, uid: str = "") -> str: ...

    @abstractmethod
    def get_sub_client(self, type_: str, name: str | None = None) -> "Client": ...

    @abstractmethod
    def set_object(self, client: "Client") -> "Client": ...


class BaseClient(Client):
    path: str = ""
    sub_part_names: list[str] = []
    header_template: str | None = None
    body_template: str | None = None

    def __init__(self, context):
        self.context = context
        self._object: Client | None = None
        self._sub_clients: list[Client] | None = None

    def set_object(self, client: Client) -> Client:
        """Register the outermost object of the decorator chain."""
        self._object = client
        return self

    def outer(self) -> Client:
        """The decorated client; internal calls go through it."""
        return self._object or self

    def get_sub_client(self, type_: str, name: str | None = None) -> Client:
        from storefront.client.factory import create_client

        return create_client(self.context, f"{self.path}/{type_}", name)

    def sub_client_names(self) -> list[str]:
        return list(self.context.config.get(f"client/html/{self.path}/subparts", self.sub_part_names))

    def sub_clients(self) -> list[Client]:
        if self._sub_clients is None:
            self._sub_clients = [self.outer().get_sub_client(name) for name in self.sub_client_names()]
        return self._sub_clients

    def init(self, view: View) -> View:
        for client in self.sub_clients():
            view = client.init(view)
        return view

    def data(self, view: View) -> View:
        for client in self.sub_clients():
            view = client.data(view)
        return view

    def header(self, view: View, uid: str = "") -> str | None:
        parts = [self.render_template(view, "template-header", self.header_template)]
        parts.extend(client.header(view, uid) for client in self.sub_clients())
        return "".join(part for part in parts if part)

    def body(self, view: View, uid: str = "") -> str:
        parts = [self.render_template(view, "template-body", self.body_template)]
        parts.extend(client.body(view, uid) for client in self.sub_clients())
        return "".join(part for part in parts if part)

    def render_template(self, view: View, option: str, default: str | None) -> str:
        name = view.config(f"client/html/{self.path}/{option}", default)
        return view.render(name) if name else ""
