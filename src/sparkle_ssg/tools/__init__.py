"""
Sparkle Tool Descriptors

Adapters describe generator commands as data; this package turns that
data into schema-described tools:

    ToolSpec (declarative) -> build_tool() -> ToolDescriptor.execute()
        -> parameter validation -> SafeInvoker -> child process

Components:
- ToolParam / ToolSpec: declarative parameter and command tables
- ToolDescriptor: name + input schema + execute(), never raises
- ConnectionState: per-session reachability of an adapter's binary
"""

from sparkle_ssg.tools.builder import build_command, build_input_schema, build_tool
from sparkle_ssg.tools.models import (
    ConnectionState,
    ParamKind,
    ParamRole,
    ToolDescriptor,
    ToolParam,
    ToolSpec,
)

__all__ = [
    "ConnectionState",
    "ParamKind",
    "ParamRole",
    "ToolDescriptor",
    "ToolParam",
    "ToolSpec",
    "build_command",
    "build_input_schema",
    "build_tool",
]
