"""Tests for the mail adapters and their registry."""

import pytest
from notifications.channel import get_mailer, reset_mailers
from notifications.channel.email_port import DeliveryFailed, MailPort
from notifications.channel.fake_email import FakeEmailAdapter
from notifications.channel.message import MailMessage
from shared.exceptions import TransientDeliveryError


def _message():
    return (
        MailMessage()
        .add_to("a@b.com", "Ada")
        .set_sender("shop@example.com", "Shop")
        .set_subject("Hi")
        .set_text("Hello!")
    )


class TestFakeEmailAdapter:
    def setup_method(self):
        self.adapter = FakeEmailAdapter()

    def test_create_returns_empty_message(self):
        message = self.adapter.create()
        assert isinstance(message, MailMessage)
        assert message.recipients == []

    def test_send_records_email(self):
        result = self.adapter.send(_message())
        assert result["status"] == "sent"
        assert result["message_id"] is not None
        assert len(self.adapter.sent_emails) == 1
        assert self.adapter.sent_emails[0]["to"] == ["a@b.com"]
        assert self.adapter.sent_emails[0]["message_id"] == result["message_id"]

    def test_send_with_html_body(self):
        self.adapter.send(_message().set_html("<b>Hi</b>"))
        assert self.adapter.sent_emails[0]["html_body"] == "<b>Hi</b>"

    def test_send_failure(self):
        self.adapter.configure(should_succeed=False, failure_reason="SMTP error")
        result = self.adapter.send(_message())
        assert result["status"] == "failed"
        assert result["error"] == "SMTP error"
        assert len(self.adapter.sent_emails) == 0

    def test_message_without_recipients_fails(self):
        result = self.adapter.send(MailMessage().set_subject("Hi"))
        assert result["status"] == "failed"
        assert self.adapter.sent_emails == []

    def test_reset(self):
        self.adapter.send(_message())
        self.adapter.configure(should_succeed=False)
        self.adapter.reset()
        assert len(self.adapter.sent_emails) == 0
        assert self.adapter.should_succeed is True


class TestMailerRegistry:
    def test_fake_is_default(self):
        assert isinstance(get_mailer(), FakeEmailAdapter)

    def test_singleton(self):
        assert get_mailer("fake") is get_mailer("fake")

    def test_reset(self):
        first = get_mailer()
        reset_mailers()
        assert get_mailer() is not first

    def test_unknown_adapter(self):
        with pytest.raises(ValueError, match="smtp"):
            get_mailer("smtp")


class TestMailPort:
    def test_is_abstract(self):
        with pytest.raises(TypeError):
            MailPort()

    def test_delivery_failed_is_transient(self):
        assert issubclass(DeliveryFailed, TransientDeliveryError)
