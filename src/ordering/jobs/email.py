"""Order e-mail jobs — one e-mail per order status transition.

For every configured status value the job selects the orders modified within
the configured window that carry this status and have no notification record
for it yet. Orders are fetched page by page; the ones already notified are
dropped from each page after fetching, so the offset always refers to the
same result set while the job writes new records. The price is that every
run pages over all orders in the window with that status, notified or not,
and does one record lookup per fetched order. Keep the window
(``limit-days``) short enough for the order volume.

Per order the job loads the order detail, resolves the recipient address,
renders the e-mail client in the recipient's language and sends it. The
notification record is written afterwards, also when the address has no
e-mail address. Any failure for an order is logged and leaves the order
without record, so the next run retries it.
"""

from datetime import UTC, datetime, timedelta

import structlog
from protean.utils.globals import current_domain

from notifications.channel.email_port import DeliveryFailed
from ordering.jobs.base import Job
from ordering.order.detail import AddressMissing, AddressType, OrderDetail
from ordering.order.order import DeliveryStatus, Order, PaymentStatus
from ordering.order.status import OrderStatus, StatusType
from storefront.clients import create_client
from storefront.view import View

logger = structlog.get_logger(__name__)

DEFAULT_LIMIT_DAYS = 30
DEFAULT_QUERY_LIMIT = 100


class OrderEmailJob(Job):
    """Shared loop of the payment and delivery e-mail jobs."""

    config_path: str = ""
    status_field: str = ""
    status_type: StatusType
    client_path: str = ""
    facility: str = ""
    default_statuses: list = []

    def run(self) -> None:
        config = self.context.config
        limit_days = int(config.get(f"{self.config_path}/limit-days", DEFAULT_LIMIT_DAYS))
        page_size = int(config.get("ordering/query/limit", DEFAULT_QUERY_LIMIT))
        since = datetime.now(UTC) - timedelta(days=limit_days)
        client = create_client(self.context, self.client_path)

        for status in self.statuses():
            start = 0

            while True:
                items = self.search(status, since, start, page_size)
                self.process(client, self.pending(items, status), status)

                count = len(items)
                start += count
                if count < page_size:
                    break

        logger.info("Order e-mail job finished", facility=self.facility, statuses=self.statuses())

    def statuses(self) -> list[int]:
        values = self.context.config.get(f"{self.config_path}/status", self.default_statuses)
        if not isinstance(values, (list, tuple)):
            values = [values]
        return [int(value) for value in values]

    def search(self, status: int, since: datetime, start: int, size: int) -> list:
        """One page of orders in the window that carry ``status``."""
        return (
            current_domain.repository_for(Order)
            ._dao.query.filter(updated_at__gte=since, **{self.status_field: status})
            .order_by("updated_at")
            .offset(start)
            .limit(size)
            .all()
            .items
        )

    def pending(self, orders: list, status: int) -> list:
        """Drop the orders that already have a notification record for ``status``."""
        return [order for order in orders if not self.notified(order.id, status)]

    def notified(self, order_id, status: int) -> bool:
        # One lookup per order: duplicate records of one order must not
        # crowd out the record of another.
        result = (
            current_domain.repository_for(OrderStatus)
            ._dao.query.filter(
                order_id=str(order_id),
                status_type=self.status_type.value,
                value=str(status),
            )
            .limit(1)
            .all()
        )
        return bool(result.items)

    def process(self, client, orders: list, status: int) -> None:
        detail_repo = current_domain.repository_for(OrderDetail)

        for order in orders:
            try:
                detail = detail_repo.get(order.detail_id)
                address = self.address_for(detail)

                if address.email:
                    self.send(client, order, detail, address)
                    logger.info(
                        "Sent order e-mail",
                        facility=self.facility,
                        order_id=str(order.id),
                        status=status,
                        email=address.email,
                    )

                self.add_order_status(order.id, status)
            except Exception as exc:
                logger.exception(
                    "Error while trying to send order e-mail",
                    facility=self.facility,
                    order_id=str(order.id),
                    status=getattr(order, self.status_field),
                    error=str(exc),
                )

    def address_for(self, detail: OrderDetail):
        return detail.payment_address()

    def send(self, client, order: Order, detail: OrderDetail, address) -> dict:
        """Render the e-mail client for one order and hand the message to the transport."""
        language = address.language_id or detail.language_id
        context = self.context.with_locale(
            site=detail.site_code,
            language=language,
            currency=detail.currency_id,
        )
        mailer = context.mailer

        view = View(
            context=context,
            params={"locale": language, "site": detail.site_code, "currency": detail.currency_id},
            values={"ext_order": order, "ext_order_detail": detail, "ext_address": address},
            mail=mailer.create(),
        )

        view = client.data(view)
        client.header(view)
        client.body(view)

        result = mailer.send(view.mail)
        if result.get("status") != "sent":
            raise DeliveryFailed(result.get("error", "Unknown delivery error"))

        return result

    def add_order_status(self, order_id, status: int) -> None:
        record = OrderStatus.record(order_id, self.status_type, status)
        current_domain.repository_for(OrderStatus).add(record)


class PaymentEmailJob(OrderEmailJob):
    name = "Order payment related e-mails"
    description = "Sends order confirmation or payment status update e-mails"

    config_path = "controller/jobs/order/email/payment"
    status_field = "payment_status"
    status_type = StatusType.EMAIL_PAYMENT
    client_path = "email/payment"
    facility = "email/order/payment"
    default_statuses = [
        PaymentStatus.REFUND.value,
        PaymentStatus.PENDING.value,
        PaymentStatus.AUTHORIZED.value,
        PaymentStatus.RECEIVED.value,
    ]


class DeliveryEmailJob(OrderEmailJob):
    name = "Order delivery related e-mails"
    description = "Sends order delivery status update e-mails"

    config_path = "controller/jobs/order/email/delivery"
    status_field = "delivery_status"
    status_type = StatusType.EMAIL_DELIVERY
    client_path = "email/delivery"
    facility = "email/order/delivery"
    default_statuses = [
        DeliveryStatus.PROGRESS.value,
        DeliveryStatus.DISPATCHED.value,
        DeliveryStatus.REFUSED.value,
        DeliveryStatus.RETURNED.value,
    ]

    def address_for(self, detail: OrderDetail):
        try:
            return detail.address(AddressType.DELIVERY)
        except AddressMissing:
            return detail.payment_address()
