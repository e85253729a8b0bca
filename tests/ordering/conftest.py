from datetime import UTC, datetime, timedelta

import pytest
from notifications.channel.fake_email import FakeEmailAdapter
from ordering.order.detail import AddressType, OrderDetail
from ordering.order.order import Order
from protean import current_domain
from protean.integrations.pytest import DomainFixture
from shared.config import Config
from shared.context import Context
from shared.i18n import Translator


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield

        for _, provider in current_domain.providers.items():
            provider._data_reset()


# ---------------------------------------------------------------------------
# Job context
# ---------------------------------------------------------------------------
@pytest.fixture()
def mailer():
    return FakeEmailAdapter()


@pytest.fixture()
def config():
    return Config(
        {
            "i18n": {
                "de": {
                    "client": {
                        "Your order {order_id}: {status}": "Ihre Bestellung {order_id}: {status}",
                        "Dear {name},": "Hallo {name},",
                        "authorized": "autorisiert",
                    }
                }
            }
        }
    )


@pytest.fixture()
def context(config, mailer):
    return Context(config=config, mailer=mailer, translator=Translator.from_config(config))


# ---------------------------------------------------------------------------
# Order data
# ---------------------------------------------------------------------------
def _place_order(
    payment_status=None,
    delivery_status=None,
    updated_days_ago=2,
    email="a@b.com",
    language=None,
    detail_language="en",
    payment_address=True,
    delivery_email=None,
):
    detail = OrderDetail.create(customer_id="cust-001", language_id=detail_language, costs=4.9)
    detail.add_product("SKU-001", "Espresso cup", 2, 12.5)
    if payment_address:
        detail.add_address(
            address_type=AddressType.PAYMENT.value,
            first_name="Ada",
            last_name="Lovelace",
            address1="12 Analytical Row",
            postal="10115",
            city="Berlin",
            country_id="DE",
            email=email,
            language_id=language,
        )
    if delivery_email is not None:
        detail.add_address(
            address_type=AddressType.DELIVERY.value,
            first_name="Charles",
            last_name="Babbage",
            city="London",
            country_id="GB",
            email=delivery_email,
        )
    current_domain.repository_for(OrderDetail).add(detail)

    updated_at = datetime.now(UTC) - timedelta(days=updated_days_ago)
    order = Order.place(detail.id)
    if payment_status is not None:
        order.update_payment_status(payment_status, updated_at=updated_at)
    if delivery_status is not None:
        order.update_delivery_status(delivery_status, updated_at=updated_at)
    order.updated_at = updated_at

    current_domain.repository_for(Order).add(order)
    return order


@pytest.fixture()
def place_order():
    return _place_order
