"""Layered, hierarchical configuration store.

Keys are ``/``-separated paths into nested tables, e.g.
``client/html/account/favorite/subparts`` resolves to
``config["client"]["html"]["account"]["favorite"]["subparts"]``.

Layers are searched top-down: values written at runtime with ``set()`` win
over the TOML file named by ``SHOP_CONFIG``. Defaults are supplied by callers::

    limit = config.get("controller/jobs/order/email/payment/limit-days", 30)
"""

import copy
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog

from shared.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)

_MISSING = object()


def _split(key: str) -> list[str]:
    parts = [part for part in key.strip("/").split("/") if part]
    if not parts:
        raise ConfigurationError(f"Invalid configuration key: {key!r}")
    return parts


def _lookup(layer: Mapping, parts: list[str]):
    node: Any = layer
    for part in parts:
        if not isinstance(node, Mapping) or part not in node:
            return _MISSING
        node = node[part]
    return node


class Config:
    """Configuration store with one read-only base layer per source and a runtime layer on top."""

    def __init__(self, *layers: Mapping[str, Any]):
        self._layers: list[dict] = [copy.deepcopy(dict(layer)) for layer in layers]
        self._local: dict = {}

    @classmethod
    def load(cls, path: str | Path | None = None) -> "Config":
        """Create a store from a TOML file.

        The path defaults to the ``SHOP_CONFIG`` environment variable. A missing
        file yields an empty store so code defaults apply.
        """
        path = path or os.getenv("SHOP_CONFIG")
        if not path:
            return cls()

        path = Path(path)
        if not path.exists():
            logger.warning("Configuration file not found, using defaults", path=str(path))
            return cls()

        with path.open("rb") as fp:
            try:
                data = tomllib.load(fp)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigurationError(f"Invalid configuration file {path}: {exc}") from exc

        logger.info("Configuration loaded", path=str(path))
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value at ``key`` from the top-most layer that defines it."""
        parts = _split(key)
        for layer in [self._local, *reversed(self._layers)]:
            value = _lookup(layer, parts)
            if value is not _MISSING:
                return copy.deepcopy(value)
        return default

    def set(self, key: str, value: Any) -> "Config":
        """Write ``value`` at ``key`` into the runtime layer."""
        parts = _split(key)
        node = self._local
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = node[part] = {}
            node = child
        node[parts[-1]] = copy.deepcopy(value)
        return self

    def has(self, key: str) -> bool:
        parts = _split(key)
        return any(_lookup(layer, parts) is not _MISSING for layer in [self._local, *self._layers])
