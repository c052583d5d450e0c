"""
Sparkle Tool Models

Declarative shapes for adapter tool tables. An adapter lists ToolSpecs;
the builder turns each one into a ToolDescriptor whose execute()
validates caller parameters and funnels through the safe invoker.
"""

from __future__ import annotations

import copy
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from sparkle_ssg.models import CommandResult


class ParamKind(str, Enum):
    """Which validator a parameter value must pass."""
    PATH = "PATH"
    URL = "URL"
    PORT = "PORT"
    INTERFACE = "INTERFACE"
    STRING = "STRING"
    FLAG = "FLAG"


class ParamRole(str, Enum):
    """Where a parameter value lands in the command line."""
    POSITIONAL = "POSITIONAL"
    OPTION = "OPTION"
    SWITCH = "SWITCH"
    CWD = "CWD"


JSON_TYPES = {
    ParamKind.PATH: "string",
    ParamKind.URL: "string",
    ParamKind.INTERFACE: "string",
    ParamKind.STRING: "string",
    ParamKind.PORT: "integer",
    ParamKind.FLAG: "boolean",
}


@dataclass(frozen=True)
class ToolParam:
    """One caller-supplied parameter of a tool.

    ``label`` names the parameter in rejection messages ("Invalid <label>").
    A ``flag`` ending in "=" is joined with its value into one argument.
    """
    name: str
    kind: ParamKind = ParamKind.STRING
    role: ParamRole = ParamRole.OPTION
    flag: str | None = None
    required: bool = False
    description: str = ""
    label: str | None = None
    default: Any = None

    @property
    def error_label(self) -> str:
        return self.label or self.name


@dataclass(frozen=True)
class ToolSpec:
    """Declarative description of one generator command."""
    name: str
    description: str
    command: tuple[str, ...] = ()
    params: tuple[ToolParam, ...] = ()


ExecuteFn = Callable[..., Awaitable[CommandResult]]


@dataclass(frozen=True)
class ToolDescriptor:
    """A tool as seen by a calling agent: name, schema and execute().

    ``execute(params, invoker=None)`` never raises; every outcome is a
    CommandResult.
    """
    name: str
    description: str
    input_schema: dict[str, Any]
    execute: ExecuteFn

    def schema(self) -> dict[str, Any]:
        """Transport-facing schema for this tool.

        Returns a copy; editing it never changes the cached descriptor.
        """
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": copy.deepcopy(self.input_schema),
        }


@dataclass
class ConnectionState:
    """Last-known reachability of an adapter's binary.

    Owned by an AdapterSession; never shared between sessions.
    """
    connected: bool = False
    last_probe: CommandResult | None = None

    def reset(self) -> None:
        self.connected = False
        self.last_probe = None

