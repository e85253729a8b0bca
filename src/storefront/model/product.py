"""Product aggregate — the catalog entries the storefront lists and links to."""

import re
from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Float, Integer, String

from storefront.domain import storefront


class ProductStatus(Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


def slugify(label: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", label.lower()).strip("-")


@storefront.aggregate
class Product:
    code: String(required=True, max_length=64)
    label: String(required=True, max_length=255)
    url_name: String(max_length=255)
    status: String(choices=ProductStatus, default=ProductStatus.ACTIVE.value)
    position: Integer(default=0)
    price: Float(default=0.0, min_value=0.0)
    created_at: DateTime()

    @classmethod
    def create(cls, code, label, url_name=None, position=0, price=0.0, status=ProductStatus.ACTIVE.value):
        return cls(
            code=code,
            label=label,
            url_name=url_name or slugify(label),
            status=status,
            position=position,
            price=price,
            created_at=datetime.now(UTC),
        )

    @property
    def is_active(self) -> bool:
        return self.status == ProductStatus.ACTIVE.value
