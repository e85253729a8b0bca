"""Tests for the client factory and decorator chains."""

import pytest
from shared.exceptions import ConfigurationError
from storefront.client.base import BaseClient
from storefront.client.decorator import ClientDecorator
from storefront.client.exceptions import ImplementationNotFound, InterfaceMismatch, InvalidName
from storefront.client.factory import CLIENT_REGISTRY, DECORATOR_REGISTRY, create_client
from storefront.view import View

PATH = "test/probe"


class ProbeClient(BaseClient):
    path = PATH

    def header(self, view, uid=""):
        return "header"

    def body(self, view, uid=""):
        return f"base[{self.outer().header(view, uid)}]"


class ExplodingClient(BaseClient):
    def __init__(self, context):
        raise RuntimeError("must not be instantiated")


def _wrapping(label):
    class Wrapping(ClientDecorator):
        def body(self, view, uid=""):
            return f"{label}({self._client.body(view, uid)})"

    return Wrapping


class Shouting(ClientDecorator):
    def header(self, view, uid=""):
        return "HEADER"


@pytest.fixture(autouse=True)
def _registry(monkeypatch):
    monkeypatch.setitem(CLIENT_REGISTRY, (PATH, "Standard"), ProbeClient)
    monkeypatch.setitem(CLIENT_REGISTRY, (PATH, "Exploding"), ExplodingClient)
    monkeypatch.setitem(DECORATOR_REGISTRY, ("common", "A"), _wrapping("A"))
    monkeypatch.setitem(DECORATOR_REGISTRY, ("common", "B"), _wrapping("B"))
    monkeypatch.setitem(DECORATOR_REGISTRY, (PATH, "C"), _wrapping("C"))
    monkeypatch.setitem(DECORATOR_REGISTRY, (PATH, "Shouting"), Shouting)


class TestNames:
    def test_invalid_name_fails_before_instantiation(self, context, monkeypatch):
        monkeypatch.setitem(CLIENT_REGISTRY, (PATH, "$$$"), ExplodingClient)

        with pytest.raises(InvalidName):
            create_client(context, PATH, "$$$")

    def test_invalid_name_is_configuration_error(self, context):
        with pytest.raises(ConfigurationError):
            create_client(context, PATH, "$$$")

    def test_invalid_path_segment(self, context):
        with pytest.raises(InvalidName):
            create_client(context, "test/pro-be")

    def test_invalid_decorator_name(self, context):
        context.config.set(f"client/html/{PATH}/decorators/global", ["B!"])
        with pytest.raises(InvalidName):
            create_client(context, PATH)

    def test_name_from_configuration(self, context):
        context.config.set(f"client/html/{PATH}/name", "Exploding")
        with pytest.raises(RuntimeError):
            create_client(context, PATH)


class TestLookup:
    def test_default_implementation(self, context):
        assert isinstance(create_client(context, PATH), ProbeClient)

    def test_unknown_implementation(self, context):
        with pytest.raises(ImplementationNotFound):
            create_client(context, PATH, "Missing")

    def test_unknown_path(self, context):
        with pytest.raises(ImplementationNotFound):
            create_client(context, "test/nothing")

    def test_interface_mismatch(self, context, monkeypatch):
        monkeypatch.setitem(CLIENT_REGISTRY, (PATH, "Plain"), object)
        with pytest.raises(InterfaceMismatch):
            create_client(context, PATH, "Plain")

    def test_unknown_decorator(self, context):
        context.config.set(f"client/html/{PATH}/decorators/local", ["Missing"])
        with pytest.raises(ImplementationNotFound):
            create_client(context, PATH)

    def test_decorator_interface_mismatch(self, context, monkeypatch):
        monkeypatch.setitem(DECORATOR_REGISTRY, ("common", "Plain"), ProbeClient)
        context.config.set(f"client/html/{PATH}/decorators/global", ["Plain"])
        with pytest.raises(InterfaceMismatch):
            create_client(context, PATH)

    def test_local_decorator_not_found_in_common_namespace(self, context):
        context.config.set(f"client/html/{PATH}/decorators/global", ["C"])
        with pytest.raises(ImplementationNotFound):
            create_client(context, PATH)


class TestDecoration:
    def test_order_default_global_local(self, context):
        context.config.set("client/html/common/decorators/default", ["A"])
        context.config.set(f"client/html/{PATH}/decorators/excludes", ["A"])
        context.config.set(f"client/html/{PATH}/decorators/global", ["B"])
        context.config.set(f"client/html/{PATH}/decorators/local", ["C"])

        client = create_client(context, PATH)

        assert client.body(View(context=context)) == "C(B(base[header]))"

    def test_default_decorators_apply_innermost(self, context):
        context.config.set("client/html/common/decorators/default", ["A", "B"])
        context.config.set(f"client/html/{PATH}/decorators/local", ["C"])

        client = create_client(context, PATH)

        assert client.body(View(context=context)) == "C(B(A(base[header])))"

    def test_self_calls_go_through_decorators(self, context):
        context.config.set(f"client/html/{PATH}/decorators/local", ["Shouting"])

        client = create_client(context, PATH)

        assert client.body(View(context=context)) == "base[HEADER]"

    def test_unknown_attributes_are_forwarded(self, context):
        context.config.set(f"client/html/{PATH}/decorators/global", ["A", "B"])

        client = create_client(context, PATH)

        assert isinstance(client, ClientDecorator)
        assert client.path == PATH
        assert client.sub_client_names() == []
