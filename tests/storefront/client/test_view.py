"""Tests for the immutable view."""

from dataclasses import replace
from datetime import datetime

import pytest
from shared.i18n import Translator
from storefront.client.exceptions import TemplateNotFound
from storefront.view import View


class TestValues:
    def test_with_values_returns_new_view(self, context):
        view = View(context=context)
        updated = view.with_values(items=[1])

        assert updated.get("items") == [1]
        assert view.get("items") is None

    def test_with_error_appends(self, context):
        view = View(context=context).with_error("errors", "one").with_error("errors", "two")
        assert view.errors("errors") == ["one", "two"]

    def test_errors_default_to_empty(self, context):
        assert View(context=context).errors("favorite_errors") == []

    def test_is_frozen(self, context):
        with pytest.raises(AttributeError):
            View(context=context).method = "POST"

    def test_param(self, context):
        view = View(context=context, params={"d_pos": "2"})
        assert view.param("d_pos") == "2"
        assert view.param("d_name", "none") == "none"


class TestHelpers:
    def test_number_with_configured_separators(self, context):
        context.config.set("client/html/common/format/separator-decimal", ",")
        context.config.set("client/html/common/format/separator-thousands", ".")

        assert View(context=context).number(1234.5) == "1.234,50"

    def test_number_defaults(self, context):
        assert View(context=context).number(1234.5, 1) == "1,234.5"

    def test_date(self, context):
        context.config.set("client/html/common/format/date", "%d.%m.%Y")
        assert View(context=context).date(datetime(2026, 3, 1)) == "01.03.2026"

    def test_date_none(self, context):
        assert View(context=context).date(None) == ""

    def test_link(self, context):
        view = View(context=context)
        assert view.link("catalog/detail", {"d_name": "cup", "d_pos": None}) == "/catalog/detail?d_name=cup"

    def test_link_target_from_configuration(self, context):
        context.config.set("client/html/account/favorite/url/target", "/my/favorites")
        assert View(context=context).link("account/favorite") == "/my/favorites"

    def test_translate_uses_context_language(self, context):
        german = replace(context, translator=Translator({"de": {"client": {"Next": "Weiter"}}}))
        view = View(context=german.with_locale(language="de"))

        assert view.translate("client", "Next") == "Weiter"

    def test_render_unknown_template(self, context):
        with pytest.raises(TemplateNotFound):
            View(context=context).render("account/favorite/body-missing")
