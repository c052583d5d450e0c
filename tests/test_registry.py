"""Tests for the adapter registry and package metadata."""

import pytest

import sparkle_ssg
from sparkle_ssg.adapters import (
    ADAPTER_MODULES,
    METADATA,
    Adapter,
    AdapterRegistry,
    adapter_count,
    get_adapter,
    get_registry,
    list_adapters,
)
from sparkle_ssg.exceptions import UnknownAdapterError

EXPECTED_ADAPTERS = {
    "babashka", "cryogen", "perun", "coleslaw", "marmot", "reggae",
    "nimble_publisher", "serum", "tableau", "zotonic", "fornax", "ema",
    "hakyll", "documenter", "franklin", "staticwebpages", "orchid", "nimrod",
    "yocaml", "frog", "pollen", "cobalt", "mdbook", "zola", "laika",
    "scalatex", "publish", "wub",
}


class TestDefaultRegistry:
    def test_count(self):
        assert adapter_count() == 28
        assert len(get_registry()) == 28

    def test_names(self):
        assert set(list_adapters()) == EXPECTED_ADAPTERS

    def test_get_returns_adapter(self):
        adapter = get_adapter("mdbook")
        assert isinstance(adapter, Adapter)
        assert adapter.binary == "mdbook"

    def test_get_is_cached(self):
        assert get_adapter("zola") is get_adapter("zola")

    def test_unknown_adapter_lists_names(self):
        with pytest.raises(UnknownAdapterError) as exc_info:
            get_adapter("jekyll")
        message = str(exc_info.value)
        assert message.startswith("Unknown adapter: jekyll. Available: ")
        assert "zola" in message
        assert set(exc_info.value.available) == EXPECTED_ADAPTERS

    @pytest.mark.parametrize("name", [None, 42, ["zola"], ""])
    def test_non_string_names(self, name):
        with pytest.raises(UnknownAdapterError):
            get_adapter(name)

    def test_tool_schemas_are_copies(self):
        registry = get_registry()
        for schema in registry.tool_schemas():
            schema["input_schema"].clear()
        assert all(schema["input_schema"]["type"] == "object" for schema in registry.tool_schemas())

    def test_contains(self):
        registry = get_registry()
        assert "zola" in registry
        assert "jekyll" not in registry
        assert ["zola"] not in registry


class TestLazyLoading:
    def test_nothing_loaded_up_front(self):
        registry = AdapterRegistry()
        assert registry.loaded == []
        registry.get("cobalt")
        assert registry.loaded == ["cobalt"]

    def test_tool_schemas_load_everything(self):
        registry = AdapterRegistry()
        schemas = registry.tool_schemas()
        assert sorted(registry.loaded) == sorted(EXPECTED_ADAPTERS)
        assert len(schemas) == sum(len(registry.get(name)) for name in registry.names())
        names = [schema["name"] for schema in schemas]
        assert len(names) == len(set(names))

    def test_custom_module_map(self):
        registry = AdapterRegistry({"zola": ADAPTER_MODULES["zola"]})
        assert registry.names() == ["zola"]
        assert len(registry) == 1
        with pytest.raises(UnknownAdapterError):
            registry.get("mdbook")

    def test_module_without_adapter(self):
        registry = AdapterRegistry({"broken": "sparkle_ssg.validation"})
        with pytest.raises(TypeError):
            registry.get("broken")


class TestMetadata:
    def test_fields(self):
        assert METADATA["name"] == "sparkle-ssg"
        assert METADATA["version"] == sparkle_ssg.__version__
        assert METADATA["count"] == 28
        assert METADATA["license"] == "MIT OR AGPL-3.0-or-later"
        assert set(METADATA["adapters"]) == EXPECTED_ADAPTERS

    def test_description_mentions_count(self):
        assert "28" in METADATA["description"]

    def test_package_exports(self):
        assert sparkle_ssg.get_adapter("zola") is get_adapter("zola")
        assert sparkle_ssg.METADATA is METADATA
