"""Client catalogue and rendering entry point.

Importing this module registers every client and decorator with the factory.
"""

from dataclasses import dataclass

from storefront.account import favorite, review  # noqa: F401
from storefront.catalog import navigator  # noqa: F401
from storefront.client.base import Client
from storefront.client.factory import create_client
from storefront.decorators import account, common  # noqa: F401
from storefront.email import delivery, payment, voucher  # noqa: F401
from storefront.view import View

__all__ = ["Page", "create_client", "render"]


@dataclass(frozen=True)
class Page:
    header: str
    body: str
    view: View


def render(client: Client, view: View, uid: str = "") -> Page:
    """Run all rendering steps of ``client``."""
    view = client.init(view)
    view = client.data(view)
    return Page(header=client.header(view, uid) or "", body=client.body(view, uid), view=view)
