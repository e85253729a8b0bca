"""OrderStatus aggregate — append-only markers of notifications already sent.

A record (order, type, value) states that the notification for that status
transition went out, so jobs do not select the order again for the same
value. At most one record per (order, type, value) is intended; jobs running
concurrently may still race and write a duplicate.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Identifier, String

from ordering.domain import ordering


class StatusType(Enum):
    EMAIL_PAYMENT = "email-payment"
    EMAIL_DELIVERY = "email-delivery"
    EMAIL_VOUCHER = "email-voucher"
    STATUS_PAYMENT = "status-payment"
    STATUS_DELIVERY = "status-delivery"


@ordering.aggregate
class OrderStatus:
    order_id = Identifier(required=True)
    status_type = String(choices=StatusType, required=True)
    value = String(required=True, max_length=32)
    created_at = DateTime()

    @classmethod
    def record(cls, order_id, status_type, value):
        if isinstance(status_type, StatusType):
            status_type = status_type.value

        return cls(
            order_id=str(order_id),
            status_type=status_type,
            value=str(value),
            created_at=datetime.now(UTC),
        )
