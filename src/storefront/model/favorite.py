"""Favorite aggregate — products a customer keeps on the favorites list.

Adding a product that is already a favorite is a no-op; removing deletes
every entry for the (customer, product) pair.
"""

from datetime import UTC, datetime

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, Identifier
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.model.product import Product

logger = structlog.get_logger(__name__)


@storefront.aggregate
class Favorite:
    customer_id: Identifier(required=True)
    product_id: Identifier(required=True)
    created_at: DateTime()

    @classmethod
    def create(cls, customer_id, product_id):
        return cls(
            customer_id=str(customer_id),
            product_id=str(product_id),
            created_at=datetime.now(UTC),
        )


@storefront.command(part_of="Favorite")
class AddFavorite:
    customer_id: Identifier(required=True)
    product_id: Identifier(required=True)


@storefront.command(part_of="Favorite")
class RemoveFavorite:
    customer_id: Identifier(required=True)
    product_id: Identifier(required=True)


def favorites_of(customer_id, product_id=None) -> list:
    query = current_domain.repository_for(Favorite)._dao.query.filter(customer_id=str(customer_id))
    if product_id is not None:
        query = query.filter(product_id=str(product_id))
    return query.all().items


@storefront.command_handler(part_of=Favorite)
class ManageFavoritesHandler:
    @handle(AddFavorite)
    def add_favorite(self, command: AddFavorite):
        existing = favorites_of(command.customer_id, command.product_id)
        if existing:
            return str(existing[0].id)

        try:
            current_domain.repository_for(Product).get(command.product_id)
        except ObjectNotFoundError:
            raise ValidationError({"product_id": [f"Unknown product: {command.product_id}"]}) from None

        favorite = Favorite.create(command.customer_id, command.product_id)
        current_domain.repository_for(Favorite).add(favorite)

        logger.info("Favorite added", customer_id=str(command.customer_id), product_id=str(command.product_id))
        return str(favorite.id)

    @handle(RemoveFavorite)
    def remove_favorite(self, command: RemoveFavorite):
        dao = current_domain.repository_for(Favorite)._dao
        for favorite in favorites_of(command.customer_id, command.product_id):
            dao.delete(favorite)

        logger.info("Favorite removed", customer_id=str(command.customer_id), product_id=str(command.product_id))
