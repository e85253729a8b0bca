"""Order status callbacks — commands and handler.

Payment and delivery providers report status changes through these commands.
"""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order


@ordering.command(part_of="Order")
class UpdatePaymentStatus:
    order_id = Identifier(required=True)
    status = Integer(required=True)


@ordering.command(part_of="Order")
class UpdateDeliveryStatus:
    order_id = Identifier(required=True)
    status = Integer(required=True)


@ordering.command_handler(part_of=Order)
class OrderStatusCallbackHandler:
    @handle(UpdatePaymentStatus)
    def update_payment_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.update_payment_status(command.status)
        repo.add(order)

    @handle(UpdateDeliveryStatus)
    def update_delivery_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.update_delivery_status(command.status)
        repo.add(order)
