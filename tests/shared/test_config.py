"""Tests for the layered configuration store."""

import pytest
from shared.config import Config
from shared.exceptions import ConfigurationError


class TestGet:
    def test_nested_path(self):
        config = Config({"client": {"html": {"account": {"favorite": {"size": 24}}}}})
        assert config.get("client/html/account/favorite/size") == 24

    def test_default_for_missing_path(self):
        assert Config().get("controller/jobs/order/email/payment/limit-days", 30) == 30

    def test_path_through_scalar_is_missing(self):
        config = Config({"client": "flat"})
        assert config.get("client/html", "default") == "default"

    def test_later_layer_wins(self):
        config = Config({"a": {"b": 1, "c": 1}}, {"a": {"b": 2}})
        assert config.get("a/b") == 2
        assert config.get("a/c") == 1

    def test_returns_copies(self):
        config = Config({"items": [1, 2]})
        config.get("items").append(3)
        assert config.get("items") == [1, 2]

    def test_empty_key(self):
        with pytest.raises(ConfigurationError):
            Config().get("/")


class TestSet:
    def test_runtime_value_wins(self):
        config = Config({"ordering": {"query": {"limit": 100}}})
        config.set("ordering/query/limit", 2)
        assert config.get("ordering/query/limit") == 2

    def test_set_is_chainable(self):
        config = Config().set("a/b", 1).set("a/c", 2)
        assert config.get("a") == {"b": 1, "c": 2}

    def test_has(self):
        config = Config({"a": {"b": None}}).set("x/y", 1)
        assert config.has("a/b")
        assert config.has("x/y")
        assert not config.has("a/c")


class TestLoad:
    def test_load_toml(self, tmp_path):
        path = tmp_path / "shop.toml"
        path.write_text('[client.html.email]\nfrom-email = "orders@shop.example"\n')

        config = Config.load(path)

        assert config.get("client/html/email/from-email") == "orders@shop.example"

    def test_path_from_environment(self, tmp_path, monkeypatch):
        path = tmp_path / "shop.toml"
        path.write_text("[locale]\nlanguage = 'de'\n")
        monkeypatch.setenv("SHOP_CONFIG", str(path))

        assert Config.load().get("locale/language") == "de"

    def test_missing_file_gives_empty_store(self, tmp_path):
        assert Config.load(tmp_path / "missing.toml").get("a", 1) == 1

    def test_invalid_file(self, tmp_path):
        path = tmp_path / "broken.toml"
        path.write_text("[client\n")

        with pytest.raises(ConfigurationError):
            Config.load(path)
