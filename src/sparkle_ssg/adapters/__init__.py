"""
Sparkle Generator Adapters

One declarative module per static site generator. Modules are imported
lazily through the registry:

    get_adapter("zola")  ->  sparkle_ssg.adapters.zola.ADAPTER

Components:
- Adapter: immutable tool table for one generator binary
- AdapterSession: connection state and invoker for a caller
- AdapterRegistry: name -> lazily loaded Adapter
"""

from sparkle_ssg.adapters.base import Adapter, AdapterSession
from sparkle_ssg.adapters.registry import (
    ADAPTER_MODULES,
    METADATA,
    AdapterRegistry,
    adapter_count,
    get_adapter,
    get_registry,
    list_adapters,
)

__all__ = [
    "ADAPTER_MODULES",
    "Adapter",
    "AdapterRegistry",
    "AdapterSession",
    "METADATA",
    "adapter_count",
    "get_adapter",
    "get_registry",
    "list_adapters",
]
