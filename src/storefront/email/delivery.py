"""Delivery status e-mail."""

from ordering.order.order import DeliveryStatus
from storefront.client.factory import register_client
from storefront.email.base import OrderMailClient, OrderMailHtmlClient, OrderMailTextClient


@register_client("email/delivery")
class DeliveryMailClient(OrderMailClient):
    path = "email/delivery"
    status_field = "delivery_status"
    status_labels = {
        DeliveryStatus.PROGRESS.value: "in progress",
        DeliveryStatus.DISPATCHED.value: "dispatched",
        DeliveryStatus.DELIVERED.value: "delivered",
        DeliveryStatus.LOST.value: "lost",
        DeliveryStatus.REFUSED.value: "refused",
        DeliveryStatus.RETURNED.value: "returned",
    }
    intro_texts = {
        DeliveryStatus.PROGRESS.value: "Your order {order_id} from {date} is being prepared for shipping.",
        DeliveryStatus.DISPATCHED.value: "Your order {order_id} from {date} has been dispatched.",
        DeliveryStatus.REFUSED.value: "The delivery of your order {order_id} from {date} was refused.",
        DeliveryStatus.RETURNED.value: "Your order {order_id} from {date} has been returned to us.",
    }


@register_client("email/delivery/text")
class DeliveryMailTextClient(OrderMailTextClient):
    path = "email/delivery/text"
    body_template = "email/delivery/text/body-standard"


@register_client("email/delivery/html")
class DeliveryMailHtmlClient(OrderMailHtmlClient):
    path = "email/delivery/html"
    body_template = "email/delivery/html/body-standard"
