"""Order e-mail clients.

The parent client (``email/payment``, ``email/delivery``, ``email/voucher``)
computes the texts in ``data`` and fills the envelope of the view's mail
message in ``header``. Its ``text`` and ``html`` sub-clients render the
bodies into the message.

The status e-mails need the order (``ext_order``), its detail
(``ext_order_detail``), the recipient address (``ext_address``) and a mail
message in the view.
"""

import mimetypes
from pathlib import Path

import structlog

from notifications.channel.message import MailMessage
from storefront.client.base import BaseClient
from storefront.client.exceptions import ClientError
from storefront.view import View

logger = structlog.get_logger(__name__)


def mail_of(view: View) -> MailMessage:
    if view.mail is None:
        raise ClientError("E-mail clients need a mail message in the view")
    return view.mail


class OrderMailClient(BaseClient):
    sub_part_names = ["text", "html"]
    status_field: str = ""
    status_labels: dict[int, str] = {}
    intro_texts: dict[int, str] = {}
    default_intro = "The status of your order {order_id} has changed to: {status}"

    def data(self, view: View) -> View:
        return super().data(self.mail_values(view))

    def greeting(self, view: View) -> str:
        address = view.get("ext_address")
        if address.full_name:
            return view.translate("client", "Dear {name},").format(name=address.full_name)
        return view.translate("client", "Dear customer,")

    def mail_values(self, view: View) -> View:
        """Add the subject and texts of the e-mail to the view."""
        order = view.get("ext_order")
        detail = view.get("ext_order_detail")
        status = getattr(order, self.status_field)

        status_label = view.translate("client", self.status_labels.get(status, str(status)))
        intro = view.translate("client", self.intro_texts.get(status, self.default_intro))
        subject = view.translate("client", "Your order {order_id}: {status}")

        products = [
            {
                "name": product.name,
                "quantity": product.quantity,
                "price": view.number(product.unit_price),
                "total": view.number(product.total),
            }
            for product in detail.products
        ]

        return view.with_values(
            email_subject=subject.format(order_id=order.id, status=status_label),
            email_greeting=self.greeting(view),
            email_intro=intro.format(order_id=order.id, status=status_label, date=view.date(order.created_at)),
            email_outro=view.translate("client", "If you have any questions, please reply to this e-mail."),
            email_status=status_label,
            email_products=products,
            email_costs=f"{view.number(detail.costs)} {detail.currency_id}",
            email_total=f"{view.number(detail.total)} {detail.currency_id}",
        )

    def header(self, view: View, uid: str = "") -> str | None:
        mail = mail_of(view)
        address = view.get("ext_address")

        mail.add_to(address.email, address.full_name or None)
        mail.set_sender(
            view.config("client/html/email/from-email", "shop@example.com"),
            view.config("client/html/email/from-name", "ShopWindow"),
        )

        reply_email = view.config("client/html/email/reply-email")
        if reply_email:
            mail.set_reply_to(reply_email, view.config("client/html/email/reply-name"))

        mail.add_header("X-MailGenerator", "ShopWindow")
        mail.add_header("Content-Language", view.context.locale.language)
        mail.set_subject(view.get("email_subject", ""))

        return super().header(view, uid)


class OrderMailTextClient(BaseClient):
    def body(self, view: View, uid: str = "") -> str:
        content = super().body(view, uid)
        mail_of(view).set_text(content)
        return content


class OrderMailHtmlClient(BaseClient):
    def body(self, view: View, uid: str = "") -> str:
        mail = mail_of(view)

        logo = view.config("client/html/email/logo")
        if logo and Path(logo).is_file():
            path = Path(logo)
            mimetype = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
            view = view.with_values(email_logo=mail.embed(path.read_bytes(), mimetype, path.name))
        elif logo:
            logger.warning("E-mail logo not found", path=str(logo))

        content = super().body(view, uid)
        mail.set_html(content)
        return content
