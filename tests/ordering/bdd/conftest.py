"""Shared BDD fixtures and step definitions for the Ordering domain."""

from datetime import UTC, datetime, timedelta

import pytest
from ordering.order.detail import AddressType, OrderDetail
from ordering.order.order import Order
from ordering.order.status import OrderStatus
from protean import current_domain
from pytest_bdd import given, parsers, then


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@pytest.fixture()
def order_data():
    return {}


@given(parsers.cfparse("an order with payment status {status:d} updated {days:d} days ago"))
def _(order_data, status, days):
    order_data["status"] = status
    order_data["updated_at"] = datetime.now(UTC) - timedelta(days=days)


@given(
    parsers.cfparse('the payment address e-mail is "{email}" in language "{language}"'),
    target_fixture="order",
)
def _(order_data, email, language):
    return _store_order(order_data, email=email, language_id=language)


@given("the payment address has no e-mail", target_fixture="order")
def _(order_data):
    return _store_order(order_data, email=None)


def _store_order(order_data, **address):
    detail = OrderDetail.create(customer_id="cust-bdd")
    detail.add_product("SKU-BDD", "Teapot", 1, 30.0)
    detail.add_address(address_type=AddressType.PAYMENT.value, first_name="Grace", last_name="Hopper", **address)
    current_domain.repository_for(OrderDetail).add(detail)

    order = Order.place(detail.id)
    order.update_payment_status(order_data["status"], updated_at=order_data["updated_at"])
    current_domain.repository_for(Order).add(order)
    return order


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
def _records(order, status_type):
    return (
        current_domain.repository_for(OrderStatus)
        ._dao.query.filter(order_id=str(order.id), status_type=status_type)
        .all()
        .items
    )


@then(parsers.cfparse('{count:d} e-mail is sent to "{email}"'))
def _(mailer, count, email):
    assert [message["to"] for message in mailer.sent_emails] == [[email]] * count


@then("no e-mail is sent")
def _(mailer):
    assert mailer.sent_emails == []


@then(parsers.cfparse('the e-mail is written in "{language}"'))
def _(mailer, language):
    assert mailer.sent_emails[-1]["headers"]["Content-Language"] == language


@then(parsers.cfparse('the order has an "{status_type}" status record with value "{value}"'))
def _(order, status_type, value):
    assert [record.value for record in _records(order, status_type)] == [value]


@then(parsers.cfparse('the order has no "{status_type}" status record'))
def _(order, status_type):
    assert _records(order, status_type) == []
