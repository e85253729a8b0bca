"""OrderDetail aggregate — the complete order: addresses, products and locale.

An Order references its detail by ``detail_id``. Jobs load the detail when they
need to address the customer; they never modify it.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text

from ordering.domain import ordering
from shared.exceptions import DataIntegrityError


class AddressType(Enum):
    PAYMENT = "payment"
    DELIVERY = "delivery"


class AddressMissing(DataIntegrityError):
    """The order detail has no address of the requested type."""


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="OrderDetail")
class OrderAddress:
    """Billing or delivery address captured with the order."""

    address_type = String(choices=AddressType, default=AddressType.PAYMENT.value)
    company = String(max_length=100)
    salutation = String(max_length=8)
    first_name = String(max_length=64)
    last_name = String(max_length=64)
    address1 = String(max_length=200)
    address2 = String(max_length=200)
    postal = String(max_length=16)
    city = String(max_length=200)
    country_id = String(max_length=2)
    email = String(max_length=255)
    telephone = String(max_length=32)
    language_id = String(max_length=5)

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


@ordering.entity(part_of="OrderDetail")
class OrderProduct:
    """A line item as it was sold."""

    product_code = String(required=True, max_length=64)
    name = String(required=True, max_length=255)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)

    @property
    def total(self) -> float:
        return self.unit_price * self.quantity


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class OrderDetail:
    customer_id = Identifier()
    site_code = String(max_length=32, default="default")
    language_id = String(max_length=5, default="en")
    currency_id = String(max_length=3, default="EUR")
    costs = Float(default=0.0)
    comment = Text()
    addresses = HasMany(OrderAddress)
    products = HasMany(OrderProduct)
    created_at = DateTime()

    @classmethod
    def create(cls, customer_id=None, site_code="default", language_id="en", currency_id="EUR", costs=0.0, comment=None):
        return cls(
            customer_id=customer_id,
            site_code=site_code,
            language_id=language_id,
            currency_id=currency_id,
            costs=costs,
            comment=comment,
            created_at=datetime.now(UTC),
        )

    def add_address(self, address_type=AddressType.PAYMENT.value, **fields):
        address = OrderAddress(address_type=address_type, **fields)
        self.add_addresses(address)
        return address

    def add_product(self, product_code, name, quantity, unit_price):
        product = OrderProduct(
            product_code=product_code,
            name=name,
            quantity=quantity,
            unit_price=unit_price,
        )
        self.add_products(product)
        return product

    def addresses_of(self, address_type) -> list:
        if isinstance(address_type, AddressType):
            address_type = address_type.value
        return [address for address in self.addresses if address.address_type == address_type]

    def address(self, address_type):
        """Return the first address of ``address_type`` or raise AddressMissing."""
        found = self.addresses_of(address_type)
        if not found:
            raise AddressMissing(f'No {AddressType(address_type).value} address found in order detail "{self.id}"')
        return found[0]

    def payment_address(self):
        return self.address(AddressType.PAYMENT)

    @property
    def subtotal(self) -> float:
        return sum(product.total for product in self.products)

    @property
    def total(self) -> float:
        return self.subtotal + (self.costs or 0.0)
