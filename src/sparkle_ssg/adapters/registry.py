"""
Sparkle Adapter Registry

Maps adapter names to the modules that define them. A module is only
imported the first time its adapter is looked up; the resulting Adapter
is cached for the life of the process.
"""

from __future__ import annotations

import importlib
from collections.abc import Mapping
from typing import Any

from sparkle_ssg._version import __version__
from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.exceptions import UnknownAdapterError
from sparkle_ssg.logging import get_logger

logger = get_logger("sparkle_ssg.adapters.registry")

_PACKAGE = "sparkle_ssg.adapters"

ADAPTER_MODULES: dict[str, str] = {
    # Clojure
    "babashka": f"{_PACKAGE}.babashka",
    "cryogen": f"{_PACKAGE}.cryogen",
    "perun": f"{_PACKAGE}.perun",
    # Common Lisp
    "coleslaw": f"{_PACKAGE}.coleslaw",
    # Crystal
    "marmot": f"{_PACKAGE}.marmot",
    # D
    "reggae": f"{_PACKAGE}.reggae",
    # Elixir
    "nimble_publisher": f"{_PACKAGE}.nimble_publisher",
    "serum": f"{_PACKAGE}.serum",
    "tableau": f"{_PACKAGE}.tableau",
    # Erlang
    "zotonic": f"{_PACKAGE}.zotonic",
    # F#
    "fornax": f"{_PACKAGE}.fornax",
    # Haskell
    "ema": f"{_PACKAGE}.ema",
    "hakyll": f"{_PACKAGE}.hakyll",
    # Julia
    "documenter": f"{_PACKAGE}.documenter",
    "franklin": f"{_PACKAGE}.franklin",
    "staticwebpages": f"{_PACKAGE}.staticwebpages",
    # Kotlin
    "orchid": f"{_PACKAGE}.orchid",
    # Nim
    "nimrod": f"{_PACKAGE}.nimrod",
    # OCaml
    "yocaml": f"{_PACKAGE}.yocaml",
    # Racket
    "frog": f"{_PACKAGE}.frog",
    "pollen": f"{_PACKAGE}.pollen",
    # Rust
    "cobalt": f"{_PACKAGE}.cobalt",
    "mdbook": f"{_PACKAGE}.mdbook",
    "zola": f"{_PACKAGE}.zola",
    # Scala
    "laika": f"{_PACKAGE}.laika",
    "scalatex": f"{_PACKAGE}.scalatex",
    # Swift
    "publish": f"{_PACKAGE}.publish",
    # Tcl
    "wub": f"{_PACKAGE}.wub",
}


class AdapterRegistry:
    """Name -> lazily imported Adapter, cached once resolved.

    Each adapter module must expose a module-level ``ADAPTER``.
    """

    def __init__(self, modules: Mapping[str, str] | None = None):
        self._modules: dict[str, str] = dict(ADAPTER_MODULES if modules is None else modules)
        self._cache: dict[str, Adapter] = {}

    def get(self, name: str) -> Adapter:
        """Resolve an adapter by name.

        Raises UnknownAdapterError, listing every valid name, when
        ``name`` is not registered.
        """
        if not isinstance(name, str) or name not in self._modules:
            raise UnknownAdapterError(str(name), self.names())

        cached = self._cache.get(name)
        if cached is not None:
            return cached

        module_path = self._modules[name]

        module = importlib.import_module(module_path)
        adapter = getattr(module, "ADAPTER", None)
        if not isinstance(adapter, Adapter):
            raise TypeError(f"Module '{module_path}' does not define an ADAPTER")

        self._cache[name] = adapter
        logger.debug("Adapter loaded", extra={"adapter": name})
        return adapter

    def names(self) -> list[str]:
        return list(self._modules.keys())

    @property
    def loaded(self) -> list[str]:
        """Names of adapters materialized so far."""
        return list(self._cache.keys())

    def tool_schemas(self) -> list[dict[str, Any]]:
        """Schemas for every tool of every adapter. Loads all adapters."""
        schemas: list[dict[str, Any]] = []
        for name in self._modules:
            schemas.extend(self.get(name).schemas())
        return schemas

    def __len__(self) -> int:
        return len(self._modules)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._modules


_default_registry = AdapterRegistry()


def get_registry() -> AdapterRegistry:
    return _default_registry


def get_adapter(name: str) -> Adapter:
    """Resolve an adapter from the default registry."""
    return _default_registry.get(name)


def list_adapters() -> list[str]:
    """Names of all registered adapters."""
    return _default_registry.names()


def adapter_count() -> int:
    """Number of registered adapters."""
    return len(_default_registry)


METADATA: dict[str, Any] = {
    "name": "sparkle-ssg",
    "version": __version__,
    "description": f"Unified tool adapters for {adapter_count()} static site generators",
    "license": "MIT OR AGPL-3.0-or-later",
    "adapters": list_adapters(),
    "count": adapter_count(),
}
