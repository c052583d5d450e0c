"""
sparkle-ssg - one safe tool-calling surface over many static site generators

Usage:
    from sparkle_ssg import AdapterSession, get_adapter

    session = AdapterSession(get_adapter("zola"))
    if await session.connect():
        result = await session.call("zola_build", {"path": "site", "drafts": True})
        print(result.success, result.stdout)

Every caller-supplied string is checked by sparkle_ssg.validation before
sparkle_ssg.invoker spawns anything, and no process is ever started
through a shell.
"""

from sparkle_ssg._version import __version__
from sparkle_ssg.adapters import (
    METADATA,
    Adapter,
    AdapterRegistry,
    AdapterSession,
    adapter_count,
    get_adapter,
    list_adapters,
)
from sparkle_ssg.exceptions import (
    ProcessLaunchError,
    SparkleError,
    UnknownAdapterError,
    UnknownToolError,
    ValidationError,
)
from sparkle_ssg.invoker import InvokerConfig, SafeInvoker, safe_invoke, safe_invoke_sync
from sparkle_ssg.models import CommandRequest, CommandResult
from sparkle_ssg.tools import ToolDescriptor, ToolParam, ToolSpec
from sparkle_ssg.validation import (
    is_valid_argument,
    is_valid_binary,
    is_valid_interface,
    is_valid_path,
    is_valid_port,
    is_valid_url,
    sanitize_path,
)

__all__ = [
    "__version__",
    # Validation
    "is_valid_argument",
    "is_valid_binary",
    "is_valid_interface",
    "is_valid_path",
    "is_valid_port",
    "is_valid_url",
    "sanitize_path",
    # Invoker
    "CommandRequest",
    "CommandResult",
    "InvokerConfig",
    "SafeInvoker",
    "safe_invoke",
    "safe_invoke_sync",
    # Tools
    "ToolDescriptor",
    "ToolParam",
    "ToolSpec",
    # Adapters
    "Adapter",
    "AdapterRegistry",
    "AdapterSession",
    "METADATA",
    "adapter_count",
    "get_adapter",
    "list_adapters",
    # Errors
    "ProcessLaunchError",
    "SparkleError",
    "UnknownAdapterError",
    "UnknownToolError",
    "ValidationError",
]
