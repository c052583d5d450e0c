"""
Sparkle Custom Exceptions

Structured exception hierarchy for the SSG gateway.
All sparkle-specific exceptions inherit from SparkleError.

Exception hierarchy:
    SparkleError
    +-- ValidationError        (caller input failed an allow-list check)
    +-- UnknownAdapterError    (adapter name not registered)
    +-- UnknownToolError       (tool name not declared by an adapter)
    +-- ProcessLaunchError     (OS refused to create the process)

ValidationError and ProcessLaunchError never escape the invoker or a
tool's execute(); they are converted into a failed CommandResult.
"""

from __future__ import annotations


class SparkleError(Exception):
    """Base exception for all sparkle-ssg errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}


class ValidationError(SparkleError):
    """Raised when caller input is rejected by a validator.

    ``reason`` is the human-readable text that ends up in
    ``CommandResult.stderr``.
    """

    def __init__(self, reason: str, value: object = None, details: dict | None = None):
        super().__init__(reason, details={"reason": reason, **(details or {})})
        self.reason = reason
        self.value = value


class UnknownAdapterError(SparkleError):
    """Raised when an adapter name is not in the registry.

    Carries the full list of valid names so callers can correct
    themselves without another lookup.
    """

    def __init__(self, name: str, available: list[str]):
        super().__init__(
            f"Unknown adapter: {name}. Available: {', '.join(available)}",
            details={"name": name, "available": list(available)},
        )
        self.name = name
        self.available = list(available)


class UnknownToolError(SparkleError):
    """Raised when an adapter does not declare the requested tool."""

    def __init__(self, adapter: str, tool_name: str, available: list[str]):
        super().__init__(
            f"Unknown tool '{tool_name}' for adapter '{adapter}'. Available: {', '.join(available)}",
            details={"adapter": adapter, "tool_name": tool_name, "available": list(available)},
        )
        self.adapter = adapter
        self.tool_name = tool_name
        self.available = list(available)


class ProcessLaunchError(SparkleError):
    """Raised when the OS fails to create or await a child process."""

    def __init__(self, binary: str, message: str, details: dict | None = None):
        super().__init__(
            message,
            details={"binary": binary, **(details or {})},
        )
        self.binary = binary
