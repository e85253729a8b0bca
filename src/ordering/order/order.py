"""Order aggregate — payment and delivery status of a placed order.

The order row is deliberately thin: line items, addresses and locale live in
the OrderDetail aggregate referenced by ``detail_id``. Payment and delivery
providers update the status values; ``updated_at`` tracks the last change and
is what the notification jobs use as their time window.
"""

from datetime import UTC, datetime
from enum import IntEnum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, String

from ordering.domain import ordering
from ordering.order.events import (
    DeliveryStatusUpdated,
    OrderPlaced,
    PaymentStatusUpdated,
)

# User-defined status values must use the private block
PRIVATE_STATUS_RANGE = range(30000, 32768)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class PaymentStatus(IntEnum):
    UNFINISHED = -1
    DELETED = 0
    CANCELED = 1
    REFUSED = 2
    REFUND = 3
    PENDING = 4
    AUTHORIZED = 5
    RECEIVED = 6


class DeliveryStatus(IntEnum):
    UNFINISHED = -1
    DELETED = 0
    PENDING = 1
    PROGRESS = 2
    DISPATCHED = 3
    DELIVERED = 4
    LOST = 5
    REFUSED = 6
    RETURNED = 7


def is_valid_status(enum_cls, value) -> bool:
    """Whether ``value`` is a known status of ``enum_cls`` or a private one."""
    try:
        value = int(value)
    except (TypeError, ValueError):
        return False
    return value in {member.value for member in enum_cls} or value in PRIVATE_STATUS_RANGE


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    detail_id = Identifier(required=True)
    channel = String(max_length=16, default="web")
    payment_status = Integer(default=PaymentStatus.UNFINISHED.value)
    delivery_status = Integer(default=DeliveryStatus.UNFINISHED.value)
    paid_at = DateTime()
    delivered_at = DateTime()
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def place(cls, detail_id, channel="web"):
        """Create a new order for a stored order detail."""
        now = datetime.now(UTC)

        order = cls(
            detail_id=detail_id,
            channel=channel,
            payment_status=PaymentStatus.UNFINISHED.value,
            delivery_status=DeliveryStatus.UNFINISHED.value,
            created_at=now,
            updated_at=now,
        )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                detail_id=str(detail_id),
                channel=channel,
                created_at=now,
            )
        )

        return order

    def update_payment_status(self, status, updated_at=None):
        """Record a payment status reported by the payment provider."""
        if not is_valid_status(PaymentStatus, status):
            raise ValidationError({"payment_status": [f"Invalid payment status: {status}"]})

        now = updated_at or datetime.now(UTC)
        previous = self.payment_status
        self.payment_status = int(status)
        self.paid_at = now
        self.updated_at = now

        self.raise_(
            PaymentStatusUpdated(
                order_id=str(self.id),
                previous_status=previous,
                payment_status=self.payment_status,
                updated_at=now,
            )
        )

    def update_delivery_status(self, status, updated_at=None):
        """Record a delivery status reported by the delivery service."""
        if not is_valid_status(DeliveryStatus, status):
            raise ValidationError({"delivery_status": [f"Invalid delivery status: {status}"]})

        now = updated_at or datetime.now(UTC)
        previous = self.delivery_status
        self.delivery_status = int(status)
        self.delivered_at = now
        self.updated_at = now

        self.raise_(
            DeliveryStatusUpdated(
                order_id=str(self.id),
                previous_status=previous,
                delivery_status=self.delivery_status,
                updated_at=now,
            )
        )
