"""Voucher e-mail.

Sent for a voucher bought in an order. The view carries the voucher code
(``ext_voucher_code``), the ordered voucher product (``ext_order_product``),
the recipient address (``ext_address``) and optionally the order detail
(``ext_order_detail``) for the currency.
"""

from storefront.client.factory import register_client
from storefront.email.base import OrderMailClient, OrderMailHtmlClient, OrderMailTextClient
from storefront.view import View


@register_client("email/voucher")
class VoucherMailClient(OrderMailClient):
    path = "email/voucher"

    def mail_values(self, view: View) -> View:
        product = view.get("ext_order_product")
        detail = view.get("ext_order_detail")
        code = view.get("ext_voucher_code", "")
        currency = detail.currency_id if detail is not None else view.context.locale.currency
        value = view.translate("client", "The value of your voucher is {value} {currency}.")

        return view.with_values(
            email_subject=view.translate("client", "Your voucher"),
            email_greeting=self.greeting(view),
            email_intro=view.translate("client", "Your voucher: {code}").format(code=code),
            email_voucher_code=code,
            email_voucher_value=value.format(value=view.number(product.unit_price), currency=currency),
            email_outro=view.translate("client", "You can redeem your voucher during checkout in our shop."),
        )


@register_client("email/voucher/text")
class VoucherMailTextClient(OrderMailTextClient):
    path = "email/voucher/text"
    body_template = "email/voucher/text/body-standard"


@register_client("email/voucher/html")
class VoucherMailHtmlClient(OrderMailHtmlClient):
    path = "email/voucher/html"
    body_template = "email/voucher/html/body-standard"
