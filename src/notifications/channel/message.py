"""Mail message builder shared by HTML clients and mail transports."""

from uuid import uuid4


class MailMessage:
    """A transactional e-mail assembled piece by piece before sending.

    HTML e-mail clients write into the message while rendering: the parent
    client sets the envelope, its ``text`` and ``html`` sub-clients set the
    bodies and embed inline images. Setters return the message for chaining.
    """

    def __init__(self, charset: str = "utf-8"):
        self.charset = charset
        self.recipients: list[tuple[str, str | None]] = []
        self.sender: tuple[str, str | None] | None = None
        self.reply_to: tuple[str, str | None] | None = None
        self.subject = ""
        self.text_body: str | None = None
        self.html_body: str | None = None
        self.headers: dict[str, str] = {}
        self.embedded: dict[str, dict] = {}

    def add_to(self, email: str, name: str | None = None) -> "MailMessage":
        self.recipients.append((email, name))
        return self

    def set_sender(self, email: str, name: str | None = None) -> "MailMessage":
        self.sender = (email, name)
        return self

    def set_reply_to(self, email: str, name: str | None = None) -> "MailMessage":
        self.reply_to = (email, name)
        return self

    def set_subject(self, subject: str) -> "MailMessage":
        self.subject = subject
        return self

    def set_text(self, body: str) -> "MailMessage":
        self.text_body = body
        return self

    def set_html(self, body: str) -> "MailMessage":
        self.html_body = body
        return self

    def add_header(self, name: str, value: str) -> "MailMessage":
        self.headers[name] = value
        return self

    def embed(self, data: bytes, mimetype: str, filename: str) -> str:
        """Attach inline content and return the ``cid:`` reference for HTML bodies."""
        content_id = f"{uuid4().hex[:16]}@shopwindow"
        self.embedded[content_id] = {
            "data": data,
            "mimetype": mimetype,
            "filename": filename,
        }
        return f"cid:{content_id}"

    def to_dict(self) -> dict:
        return {
            "to": [email for email, _ in self.recipients],
            "from": self.sender[0] if self.sender else None,
            "reply_to": self.reply_to[0] if self.reply_to else None,
            "subject": self.subject,
            "body": self.text_body,
            "html_body": self.html_body,
            "headers": dict(self.headers),
            "embedded": sorted(self.embedded),
        }
