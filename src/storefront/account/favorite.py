"""Favorites section of the customer account.

POST requests with ``fav_action=add|delete`` and one or more ``fav_id`` values
change the list of the logged-in customer. The list holds at most
``client/html/account/favorite/maxitems`` products and is shown in pages of
``fav-size`` items (``client/html/account/favorite/size``, 1 to 100).
"""

import math

import structlog
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from storefront.client.base import BaseClient
from storefront.client.exceptions import ClientError
from storefront.client.factory import register_client
from storefront.decorators.common import NON_RECOVERABLE
from storefront.model.favorite import AddFavorite, Favorite, RemoveFavorite, favorites_of
from storefront.model.product import Product
from storefront.view import View

logger = structlog.get_logger(__name__)

DEFAULT_MAX_ITEMS = 100
DEFAULT_PAGE_SIZE = 48
MAX_PAGE_SIZE = 100


def param_list(view: View, name: str) -> list[str]:
    value = view.param(name, [])
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item]
    return [str(value)] if value else []


def param_int(view: View, name: str, default: int) -> int:
    try:
        return int(view.param(name, default))
    except (TypeError, ValueError):
        return default


def validation_messages(exc: ValidationError) -> list[str]:
    return [message for messages in exc.messages.values() for message in messages]


@register_client("account/favorite")
class FavoriteClient(BaseClient):
    path = "account/favorite"
    header_template = "account/favorite/header-standard"
    body_template = "account/favorite/body-standard"

    def init(self, view: View) -> View:
        customer_id = view.context.user_id
        ids = param_list(view, "fav_id")

        try:
            if customer_id and ids and view.method == "POST":
                action = view.param("fav_action")
                if action == "add":
                    self.add_favorites(view, customer_id, ids)
                elif action == "delete":
                    self.delete_favorites(customer_id, ids)

            return super().init(view)
        except ClientError as exc:
            return view.with_error("favorite_errors", str(exc))
        except ValidationError as exc:
            return view.with_error("favorite_errors", *validation_messages(exc))
        except Exception:
            logger.exception("Updating favorites failed", customer_id=customer_id)
            return view.with_error("favorite_errors", view.translate("client", NON_RECOVERABLE))

    def add_favorites(self, view: View, customer_id: str, ids: list[str]) -> None:
        max_items = int(view.config("client/html/account/favorite/maxitems", DEFAULT_MAX_ITEMS))
        known = {str(favorite.product_id) for favorite in favorites_of(customer_id)}
        new_ids = [product_id for product_id in dict.fromkeys(ids) if product_id not in known]

        if len(known) + len(new_ids) > max_items:
            message = view.translate("client", "You can only save up to {count} products as favorites")
            raise ClientError(message.format(count=max_items))

        for product_id in new_ids:
            current_domain.process(AddFavorite(customer_id=customer_id, product_id=product_id), asynchronous=False)

    def delete_favorites(self, customer_id: str, ids: list[str]) -> None:
        for product_id in ids:
            current_domain.process(
                RemoveFavorite(customer_id=customer_id, product_id=product_id),
                asynchronous=False,
            )

    def page_size(self, view: View) -> int:
        default = int(view.config("client/html/account/favorite/size", DEFAULT_PAGE_SIZE))
        size = param_int(view, "fav-size", default)
        return size if 1 <= size <= MAX_PAGE_SIZE else default

    def data(self, view: View) -> View:
        size = self.page_size(view)
        current = max(param_int(view, "fav_page", 1), 1)
        items, total = [], 0

        if view.context.user_id:
            try:
                items, total = self.favorite_products(view.context.user_id, current, size)
            except Exception:
                logger.exception("Loading favorites failed", customer_id=view.context.user_id)
                view = view.with_error("favorite_errors", view.translate("client", NON_RECOVERABLE))

        last = max(math.ceil(total / size), 1)
        view = view.with_values(
            favorite_items=items,
            favorite_total=total,
            favorite_page_first=1,
            favorite_page_prev=max(current - 1, 1),
            favorite_page_next=min(current + 1, last),
            favorite_page_last=last,
            favorite_page_curr=current,
        )
        return super().data(view)

    def favorite_products(self, customer_id: str, page: int, size: int) -> tuple[list, int]:
        result = (
            current_domain.repository_for(Favorite)
            ._dao.query.filter(customer_id=str(customer_id))
            .order_by("created_at")
            .offset((page - 1) * size)
            .limit(size)
            .all()
        )

        product_ids = [str(favorite.product_id) for favorite in result.items]
        if not product_ids:
            return [], result.total

        products = {
            str(product.id): product
            for product in current_domain.repository_for(Product)
            ._dao.query.filter(id__in=product_ids)
            .limit(len(product_ids))
            .all()
            .items
        }
        return [products[product_id] for product_id in product_ids if product_id in products], result.total
