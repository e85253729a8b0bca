"""The view handed from step to step while a client renders.

A view is immutable. Clients return a new view from ``init`` and ``data``
(``with_values``, ``with_error``) instead of assigning to a shared one. The
mail message of an e-mail view is the only mutable object it carries.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any
from urllib.parse import urlencode

from notifications.channel.message import MailMessage
from shared.context import Context
from storefront.templates import get_template


@dataclass(frozen=True)
class View:
    context: Context
    params: Mapping[str, Any] = field(default_factory=dict)
    values: Mapping[str, Any] = field(default_factory=dict)
    method: str = "GET"
    mail: MailMessage | None = None

    def get(self, key: str, default=None):
        """A value assigned by a client."""
        return self.values.get(key, default)

    def param(self, name: str, default=None):
        """A request parameter."""
        return self.params.get(name, default)

    def config(self, key: str, default=None):
        return self.context.config.get(key, default)

    def translate(self, domain: str, singular: str, plural: str | None = None, number: int = 1) -> str:
        return self.context.translate(domain, singular, plural, number)

    def errors(self, key: str) -> list:
        return list(self.values.get(key, []))

    def with_values(self, **values) -> "View":
        return replace(self, values={**self.values, **values})

    def with_error(self, key: str, *messages: str) -> "View":
        return self.with_values(**{key: [*self.errors(key), *messages]})

    def number(self, value, decimals: int = 2) -> str:
        """Format a number with the configured separators."""
        decimal_sep = self.config("client/html/common/format/separator-decimal", ".")
        thousands_sep = self.config("client/html/common/format/separator-thousands", ",")

        text = f"{float(value or 0):,.{decimals}f}"
        return text.replace(",", "\0").replace(".", decimal_sep).replace("\0", thousands_sep)

    def date(self, value: datetime | None) -> str:
        if value is None:
            return ""
        return value.strftime(self.config("client/html/common/format/date", "%Y-%m-%d"))

    def link(self, name: str, params: Mapping | None = None) -> str:
        """URL of the page ``name`` (``catalog/detail``) with query parameters."""
        target = self.config(f"client/html/{name}/url/target", f"/{name}")
        query = urlencode({key: value for key, value in (params or {}).items() if value is not None}, doseq=True)
        return f"{target}?{query}" if query else target

    def render(self, template_name: str) -> str:
        return get_template(template_name).render(self)
