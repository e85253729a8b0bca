"""Template registry — maps template names to template classes.

Clients look templates up by the names configured in
``client/html/<path>/template-body`` and ``template-header``.
"""

from storefront.client.exceptions import TemplateNotFound
from storefront.templates.account import (
    FavoriteBodyTemplate,
    FavoriteHeaderTemplate,
    ReviewBodyTemplate,
    ReviewHeaderTemplate,
)
from storefront.templates.catalog import NavigatorBodyTemplate, NavigatorHeaderTemplate
from storefront.templates.email import (
    OrderMailHtmlTemplate,
    OrderMailTextTemplate,
    VoucherMailHtmlTemplate,
    VoucherMailTextTemplate,
)
from storefront.templates.page import StandardPageTemplate

TEMPLATE_REGISTRY: dict[str, type] = {
    StandardPageTemplate.name: StandardPageTemplate,
    FavoriteHeaderTemplate.name: FavoriteHeaderTemplate,
    FavoriteBodyTemplate.name: FavoriteBodyTemplate,
    ReviewHeaderTemplate.name: ReviewHeaderTemplate,
    ReviewBodyTemplate.name: ReviewBodyTemplate,
    NavigatorHeaderTemplate.name: NavigatorHeaderTemplate,
    NavigatorBodyTemplate.name: NavigatorBodyTemplate,
    "email/payment/text/body-standard": OrderMailTextTemplate,
    "email/payment/html/body-standard": OrderMailHtmlTemplate,
    "email/delivery/text/body-standard": OrderMailTextTemplate,
    "email/delivery/html/body-standard": OrderMailHtmlTemplate,
    "email/voucher/text/body-standard": VoucherMailTextTemplate,
    "email/voucher/html/body-standard": VoucherMailHtmlTemplate,
}


def get_template(name: str):
    """Look up a template class by name."""
    template_cls = TEMPLATE_REGISTRY.get(name)
    if template_cls is None:
        raise TemplateNotFound(f"No template registered with name: {name}")
    return template_cls
