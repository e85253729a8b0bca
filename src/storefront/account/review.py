"""Reviews section of the customer account."""

import math

import structlog
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from storefront.account.favorite import MAX_PAGE_SIZE, param_int, validation_messages
from storefront.client.base import BaseClient
from storefront.client.factory import register_client
from storefront.decorators.common import NON_RECOVERABLE
from storefront.model.product import Product
from storefront.model.review import Review, SubmitReview
from storefront.view import View

logger = structlog.get_logger(__name__)

DEFAULT_PAGE_SIZE = 10


@register_client("account/review")
class ReviewClient(BaseClient):
    path = "account/review"
    header_template = "account/review/header-standard"
    body_template = "account/review/body-standard"

    def init(self, view: View) -> View:
        customer_id = view.context.user_id
        product_id = view.param("review_product")

        if not (customer_id and product_id and view.method == "POST"):
            return super().init(view)

        try:
            current_domain.process(
                SubmitReview(
                    customer_id=customer_id,
                    product_id=product_id,
                    rating=param_int(view, "review_rating", -1),
                    comment=view.param("review_comment"),
                ),
                asynchronous=False,
            )
            view = view.with_values(review_info=[view.translate("client", "Thank you for your review")])
        except ValidationError as exc:
            view = view.with_error("review_errors", *validation_messages(exc))
        except Exception:
            logger.exception("Submitting review failed", customer_id=customer_id, product_id=product_id)
            view = view.with_error("review_errors", view.translate("client", NON_RECOVERABLE))

        return super().init(view)

    def page_size(self, view: View) -> int:
        size = int(view.config("client/html/account/review/size", DEFAULT_PAGE_SIZE))
        return size if 1 <= size <= MAX_PAGE_SIZE else DEFAULT_PAGE_SIZE

    def data(self, view: View) -> View:
        size = self.page_size(view)
        current = max(param_int(view, "review_page", 1), 1)
        reviews, products, total = [], {}, 0

        if view.context.user_id:
            result = (
                current_domain.repository_for(Review)
                ._dao.query.filter(customer_id=str(view.context.user_id))
                .order_by("-created_at")
                .offset((current - 1) * size)
                .limit(size)
                .all()
            )
            reviews, total = result.items, result.total

            product_ids = [str(review.product_id) for review in reviews]
            if product_ids:
                products = {
                    str(product.id): product
                    for product in current_domain.repository_for(Product)
                    ._dao.query.filter(id__in=product_ids)
                    .limit(len(product_ids))
                    .all()
                    .items
                }

        last = max(math.ceil(total / size), 1)
        view = view.with_values(
            review_items=reviews,
            review_products=products,
            review_total=total,
            review_page_prev=max(current - 1, 1),
            review_page_next=min(current + 1, last),
            review_page_last=last,
            review_page_curr=current,
        )
        return super().data(view)
