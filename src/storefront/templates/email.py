"""Order e-mail bodies for the payment, delivery and voucher e-mails.

The e-mail clients compute the texts in the recipient's language; these
templates only lay them out.
"""

from storefront.templates.helpers import enc_attr, enc_html


class OrderMailTextTemplate:
    @staticmethod
    def render(view) -> str:
        lines = [view.get("email_greeting", ""), "", view.get("email_intro", ""), ""]

        for product in view.get("email_products", []):
            lines.append(f"{product['quantity']} x {product['name']}  {product['total']}")

        lines.extend(
            [
                "",
                f"{view.translate('client', 'Shipping')}: {view.get('email_costs', '')}",
                f"{view.translate('client', 'Total')}: {view.get('email_total', '')}",
                "",
                view.get("email_outro", ""),
            ]
        )

        return "\n".join(lines) + "\n"


class OrderMailHtmlTemplate:
    @staticmethod
    def render(view) -> str:
        logo = view.get("email_logo")
        logo_html = f'<img class="logo" src="{enc_attr(logo)}" alt="">' if logo else ""

        rows = "".join(
            "<tr>"
            f'<td class="quantity">{enc_html(product["quantity"])}</td>'
            f'<td class="name">{enc_html(product["name"])}</td>'
            f'<td class="price">{enc_html(product["price"])}</td>'
            f'<td class="total">{enc_html(product["total"])}</td>'
            "</tr>"
            for product in view.get("email_products", [])
        )

        return (
            "<!DOCTYPE html>\n"
            f'<html lang="{enc_attr(view.context.locale.language)}"><body>'
            f"{logo_html}"
            f'<p class="greeting">{enc_html(view.get("email_greeting"))}</p>'
            f'<p class="intro">{enc_html(view.get("email_intro"))}</p>'
            f'<table class="products">{rows}</table>'
            f'<p class="costs">{enc_html(view.translate("client", "Shipping"))}: {enc_html(view.get("email_costs"))}</p>'
            f'<p class="sum">{enc_html(view.translate("client", "Total"))}: {enc_html(view.get("email_total"))}</p>'
            f'<p class="outro">{enc_html(view.get("email_outro"))}</p>'
            "</body></html>\n"
        )


class VoucherMailTextTemplate:
    @staticmethod
    def render(view) -> str:
        lines = [
            view.get("email_greeting", ""),
            "",
            view.get("email_intro", ""),
            "",
            view.get("email_voucher_value", ""),
            "",
            view.get("email_outro", ""),
        ]
        return "\n".join(lines) + "\n"


class VoucherMailHtmlTemplate:
    @staticmethod
    def render(view) -> str:
        logo = view.get("email_logo")
        logo_html = f'<img class="logo" src="{enc_attr(logo)}" alt="">' if logo else ""

        return (
            "<!DOCTYPE html>\n"
            f'<html lang="{enc_attr(view.context.locale.language)}">'
            f"<head><title>{enc_html(view.get('email_subject'))}</title></head><body>"
            f"{logo_html}"
            f'<p class="greeting">{enc_html(view.get("email_greeting"))}</p>'
            f'<p class="intro">{enc_html(view.get("email_intro"))}</p>'
            f'<p class="voucher"><strong>{enc_html(view.get("email_voucher_code"))}</strong></p>'
            f'<p class="body">{enc_html(view.get("email_voucher_value"))}</p>'
            f'<p class="outro">{enc_html(view.get("email_outro"))}</p>'
            "</body></html>\n"
        )
