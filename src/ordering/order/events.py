"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderPlaced:
    """A new order was placed at checkout."""

    __version__ = 1

    order_id = Identifier(required=True)
    detail_id = Identifier(required=True)
    channel = String(max_length=16)
    created_at = DateTime(required=True)


@ordering.event(part_of="Order")
class PaymentStatusUpdated:
    """The payment provider reported a new payment status."""

    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = Integer()
    payment_status = Integer(required=True)
    updated_at = DateTime(required=True)


@ordering.event(part_of="Order")
class DeliveryStatusUpdated:
    """The delivery service reported a new delivery status."""

    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = Integer()
    delivery_status = Integer(required=True)
    updated_at = DateTime(required=True)
