"""Tests for translations."""

from shared.config import Config
from shared.i18n import Translator

CATALOGS = {
    "de": {
        "client": {
            "Your order {order_id}": "Ihre Bestellung {order_id}",
            "{count} item": ["{count} Artikel", "{count} Artikel (mehrere)"],
        }
    },
    "de_CH": {"client": {"Shipping": "Versand (CH)"}},
}


class TestTranslate:
    def setup_method(self):
        self.translator = Translator(CATALOGS)

    def test_translates(self):
        assert self.translator.translate("de", "client", "Your order {order_id}") == "Ihre Bestellung {order_id}"

    def test_untranslated_returns_message_id(self):
        assert self.translator.translate("de", "client", "Unknown") == "Unknown"

    def test_unknown_language(self):
        assert self.translator.translate("fr", "client", "Your order {order_id}") == "Your order {order_id}"

    def test_regional_language(self):
        assert self.translator.translate("de_CH", "client", "Shipping") == "Versand (CH)"

    def test_falls_back_to_base_language(self):
        assert self.translator.translate("de-CH", "client", "Your order {order_id}") == "Ihre Bestellung {order_id}"

    def test_plural(self):
        translate = self.translator.translate
        assert translate("de", "client", "{count} item", "{count} items", 1) == "{count} Artikel"
        assert translate("de", "client", "{count} item", "{count} items", 3) == "{count} Artikel (mehrere)"

    def test_untranslated_plural(self):
        assert self.translator.translate("en", "client", "{count} item", "{count} items", 2) == "{count} items"

    def test_from_config(self):
        translator = Translator.from_config(Config({"i18n": CATALOGS}))
        assert translator.translate("de", "client", "Your order {order_id}") == "Ihre Bestellung {order_id}"
