import pytest
from notifications.channel.fake_email import FakeEmailAdapter
from protean import current_domain
from protean.integrations.pytest import DomainFixture
from shared.config import Config
from shared.context import Context
from storefront.model.product import Product
from storefront.view import View


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    with storefront_bed.domain_context():
        yield

        for _, provider in current_domain.providers.items():
            provider._data_reset()


@pytest.fixture()
def config():
    return Config()


@pytest.fixture()
def context(config):
    return Context(config=config, mailer=FakeEmailAdapter())


@pytest.fixture()
def customer_context(context):
    return context.with_user("cust-001")


@pytest.fixture()
def make_view():
    def _make_view(context, method="GET", **params):
        return View(context=context, params=params, method=method)

    return _make_view


@pytest.fixture()
def products():
    repo = current_domain.repository_for(Product)
    items = [
        Product.create(f"SKU-{index:03d}", label, position=index, price=10.0 + index)
        for index, label in enumerate(["Cup", "Saucer", "Teapot", "Kettle", "Tray"], start=1)
    ]
    for product in items:
        repo.add(product)
    return items
