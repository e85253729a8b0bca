"""Review aggregate — customer ratings of products.

A customer reviews a product once. New reviews wait for moderation; the
account section shows customers their own reviews in every state.
"""

from datetime import UTC, datetime
from enum import Enum

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.model.product import Product

logger = structlog.get_logger(__name__)


class ReviewStatus(Enum):
    PENDING = "Pending"
    PUBLISHED = "Published"
    REJECTED = "Rejected"


@storefront.aggregate
class Review:
    customer_id: Identifier(required=True)
    product_id: Identifier(required=True)
    rating: Integer(required=True, min_value=0, max_value=5)
    comment: Text()
    status: String(choices=ReviewStatus, default=ReviewStatus.PENDING.value)
    created_at: DateTime()

    @classmethod
    def submit(cls, customer_id, product_id, rating, comment=None):
        return cls(
            customer_id=str(customer_id),
            product_id=str(product_id),
            rating=rating,
            comment=comment,
            status=ReviewStatus.PENDING.value,
            created_at=datetime.now(UTC),
        )


@storefront.command(part_of="Review")
class SubmitReview:
    customer_id: Identifier(required=True)
    product_id: Identifier(required=True)
    rating: Integer(required=True)
    comment: Text()


@storefront.command_handler(part_of=Review)
class SubmitReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command: SubmitReview):
        repo = current_domain.repository_for(Review)

        existing = (
            repo._dao.query.filter(
                customer_id=str(command.customer_id),
                product_id=str(command.product_id),
            )
            .all()
            .items
        )
        if existing:
            raise ValidationError({"product_id": ["You have already reviewed this product"]})

        try:
            current_domain.repository_for(Product).get(command.product_id)
        except ObjectNotFoundError:
            raise ValidationError({"product_id": [f"Unknown product: {command.product_id}"]}) from None

        review = Review.submit(command.customer_id, command.product_id, command.rating, command.comment)
        repo.add(review)

        logger.info(
            "Review submitted",
            customer_id=str(command.customer_id),
            product_id=str(command.product_id),
            rating=command.rating,
        )
        return str(review.id)
