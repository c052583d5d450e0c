"""
Sparkle Adapter Base

An Adapter is the immutable definition of one static site generator:
its binary, its version probe, and its tool table. It is built once when
its module is imported and never mutated.

Reachability is tracked by an AdapterSession, which owns its own
ConnectionState and invoker. Two sessions over the same adapter never
share state.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from sparkle_ssg.exceptions import UnknownToolError
from sparkle_ssg.invoker import CommandInvoker, get_default_invoker
from sparkle_ssg.logging import get_logger
from sparkle_ssg.models import CommandResult
from sparkle_ssg.tools.builder import build_tool
from sparkle_ssg.tools.models import ConnectionState, ToolDescriptor, ToolSpec

logger = get_logger("sparkle_ssg.adapters")


class Adapter:
    """Declarative binding of one generator's commands as tools.

    A ``<tool_prefix>_version`` tool running ``version_args`` is added
    unless the table already declares one.
    """

    def __init__(
        self,
        key: str,
        name: str,
        language: str,
        description: str,
        binary: str,
        tools: Iterable[ToolSpec],
        homepage: str = "",
        version_args: tuple[str, ...] = ("--version",),
        tool_prefix: str | None = None,
    ):
        self.key = key
        self.name = name
        self.language = language
        self.description = description
        self.binary = binary
        self.homepage = homepage
        self.version_args = tuple(version_args)
        self.tool_prefix = tool_prefix or key

        specs = list(tools)
        version_name = f"{self.tool_prefix}_version"
        if not any(spec.name == version_name for spec in specs):
            specs.append(ToolSpec(
                name=version_name,
                description=f"Get {name} version",
                command=self.version_args,
            ))

        self._tools: dict[str, ToolDescriptor] = {}
        for spec in specs:
            if spec.name in self._tools:
                raise ValueError(f"Tool '{spec.name}' is declared twice in adapter '{key}'")
            self._tools[spec.name] = build_tool(binary, spec)

    @property
    def tools(self) -> tuple[ToolDescriptor, ...]:
        return tuple(self._tools.values())

    @property
    def tool_names(self) -> list[str]:
        return list(self._tools.keys())

    def get_tool(self, name: str) -> ToolDescriptor:
        """Look up a tool by name. Raises UnknownToolError if undeclared."""
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(self.key, name, self.tool_names)
        return tool

    def schemas(self) -> list[dict[str, Any]]:
        """Transport-facing schemas for every tool of this adapter."""
        return [tool.schema() for tool in self._tools.values()]

    def info(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "name": self.name,
            "language": self.language,
            "description": self.description,
            "homepage": self.homepage,
            "binary": self.binary,
            "tools": self.tool_names,
        }

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __repr__(self) -> str:
        return f"Adapter(key={self.key!r}, binary={self.binary!r}, tools={len(self)})"


class AdapterSession:
    """A caller's handle on an adapter: invoker plus connection state."""

    def __init__(self, adapter: Adapter, invoker: CommandInvoker | None = None):
        self.adapter = adapter
        self._invoker = invoker or get_default_invoker()
        self.state = ConnectionState()

    @property
    def is_connected(self) -> bool:
        return self.state.connected

    async def connect(self) -> bool:
        """Probe the binary with its version arguments.

        Sets ``connected`` from the probe's success and returns it.
        """
        try:
            result = await self._invoker.invoke(self.adapter.binary, self.adapter.version_args)
        except Exception as e:
            logger.warning(
                "Version probe raised",
                extra={"adapter": self.adapter.key, "binary": self.adapter.binary, "reason": str(e)},
            )
            result = CommandResult.failure(str(e) or "Version probe failed")

        self.state.connected = result.success
        self.state.last_probe = result
        logger.info(
            "Adapter probed",
            extra={"adapter": self.adapter.key, "binary": self.adapter.binary, "exit_code": result.code},
        )
        return self.state.connected

    async def disconnect(self) -> None:
        self.state.reset()

    async def call(self, tool_name: str, params: Mapping[str, Any] | None = None) -> CommandResult:
        """Execute one of the adapter's tools through this session's invoker.

        Raises UnknownToolError for an undeclared tool; every other
        outcome is a CommandResult.
        """
        tool = self.adapter.get_tool(tool_name)
        return await tool.execute(params, invoker=self._invoker)
