"""Payment status e-mail."""

from ordering.order.order import PaymentStatus
from storefront.client.factory import register_client
from storefront.email.base import OrderMailClient, OrderMailHtmlClient, OrderMailTextClient


@register_client("email/payment")
class PaymentMailClient(OrderMailClient):
    path = "email/payment"
    status_field = "payment_status"
    status_labels = {
        PaymentStatus.REFUND.value: "refunded",
        PaymentStatus.PENDING.value: "pending",
        PaymentStatus.AUTHORIZED.value: "authorized",
        PaymentStatus.RECEIVED.value: "received",
        PaymentStatus.CANCELED.value: "canceled",
        PaymentStatus.REFUSED.value: "refused",
    }
    intro_texts = {
        PaymentStatus.REFUND.value: "The payment for your order {order_id} from {date} has been refunded.",
        PaymentStatus.PENDING.value: "Thank you for your order {order_id} from {date}. We are waiting for your payment.",
        PaymentStatus.AUTHORIZED.value: "Thank you for your order {order_id} from {date}. Your payment has been authorized.",
        PaymentStatus.RECEIVED.value: "Thank you for your order {order_id} from {date}. We have received your payment.",
    }


@register_client("email/payment/text")
class PaymentMailTextClient(OrderMailTextClient):
    path = "email/payment/text"
    body_template = "email/payment/text/body-standard"


@register_client("email/payment/html")
class PaymentMailHtmlClient(OrderMailHtmlClient):
    path = "email/payment/html"
    body_template = "email/payment/html/body-standard"
