"""Product navigator of the catalog stage.

On a product detail page reached from a product list, ``d_pos`` is the
position of the product in that list. The navigator links to the products
before and after it, in the list order given by ``f_sort``.
"""

import structlog
from protean.utils.globals import current_domain

from storefront.client.base import BaseClient
from storefront.client.factory import register_client
from storefront.model.product import Product, ProductStatus
from storefront.view import View

logger = structlog.get_logger(__name__)

SORT_FIELDS = {
    "relevance": "position",
    "name": "label",
    "price": "price",
    "ctime": "created_at",
}


def sort_field(sort: str) -> str:
    descending = sort.startswith("-")
    field = SORT_FIELDS.get(sort.lstrip("-"), SORT_FIELDS["relevance"])
    return f"-{field}" if descending else field


@register_client("catalog/stage/navigator")
class NavigatorClient(BaseClient):
    path = "catalog/stage/navigator"
    header_template = "catalog/stage/navigator/header-standard"
    body_template = "catalog/stage/navigator/body-standard"

    def data(self, view: View) -> View:
        position = view.param("d_pos")
        if position is None or not (view.param("d_name") or view.param("d_prodid")):
            return super().data(view)

        try:
            position = int(position)
        except (TypeError, ValueError):
            return super().data(view)

        # Neighbours only: the product itself and the ones directly around it
        start, size = (0, 2) if position < 1 else (position - 1, 3)
        sort = view.param("f_sort") or view.config("client/html/catalog/lists/sort", "relevance")

        products = (
            current_domain.repository_for(Product)
            ._dao.query.filter(status=ProductStatus.ACTIVE.value)
            .order_by(sort_field(sort))
            .offset(start)
            .limit(size)
            .all()
            .items
        )

        prev_product = products[0] if position > 0 and products else None
        next_product = None
        if (position == 0 and len(products) == 2) or len(products) == 3:
            next_product = products[-1]

        logger.debug("Navigator products loaded", position=position, sort=sort, count=len(products))

        view = view.with_values(
            navigator_position=position,
            navigator_sort=sort,
            navigator_prev=prev_product,
            navigator_next=next_product,
        )
        return super().data(view)
