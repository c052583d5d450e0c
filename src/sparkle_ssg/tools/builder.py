"""
Sparkle Tool Builder

Turns a declarative ToolSpec into a ToolDescriptor. The generated
execute() checks each caller parameter with the validator for its kind,
assembles the argument vector, and hands it to the safe invoker, which
validates the whole command again before spawning anything.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from sparkle_ssg.exceptions import ValidationError
from sparkle_ssg.invoker import CommandInvoker, get_default_invoker
from sparkle_ssg.logging import get_logger
from sparkle_ssg.models import CommandResult
from sparkle_ssg.tools.models import (
    JSON_TYPES,
    ParamKind,
    ParamRole,
    ToolDescriptor,
    ToolParam,
    ToolSpec,
)
from sparkle_ssg.validation import (
    is_valid_argument,
    is_valid_interface,
    is_valid_path,
    is_valid_port,
    is_valid_url,
)

logger = get_logger("sparkle_ssg.tools")


def _is_flag(value: object) -> bool:
    return isinstance(value, bool)


VALIDATORS: dict[ParamKind, Callable[[object], bool]] = {
    ParamKind.PATH: is_valid_path,
    ParamKind.URL: is_valid_url,
    ParamKind.PORT: is_valid_port,
    ParamKind.INTERFACE: is_valid_interface,
    ParamKind.STRING: is_valid_argument,
    ParamKind.FLAG: _is_flag,
}


def _is_absent(value: object) -> bool:
    return value is None or value is False or value == ""


def build_input_schema(spec: ToolSpec) -> dict[str, Any]:
    """JSON-Schema object describing a tool's parameters."""
    properties: dict[str, Any] = {}
    for param in spec.params:
        prop: dict[str, Any] = {"type": JSON_TYPES[param.kind]}
        if param.description:
            prop["description"] = param.description
        if param.default is not None:
            prop["default"] = param.default
        properties[param.name] = prop

    schema: dict[str, Any] = {"type": "object", "properties": properties}
    required = [p.name for p in spec.params if p.required]
    if required:
        schema["required"] = required
    return schema


def _check(param: ToolParam, value: object) -> None:
    if not VALIDATORS[param.kind](value):
        raise ValidationError(f"Invalid {param.error_label}", value=value)


def build_command(spec: ToolSpec, params: Mapping[str, Any]) -> tuple[list[str], str | None]:
    """Build ``(argv, cwd)`` for a tool call.

    argv is the subcommand, then positionals, then options and switches,
    each group in declaration order. Raises ValidationError on the first
    missing or invalid parameter.
    """
    if not isinstance(params, Mapping):
        raise ValidationError("Invalid parameters", value=params)

    positionals: list[str] = []
    trailing: list[str] = []
    cwd: str | None = None

    for param in spec.params:
        value = params.get(param.name)
        if _is_absent(value) and param.default is not None:
            value = param.default
        if _is_absent(value):
            if param.required:
                raise ValidationError(f"Missing required parameter: {param.name}")
            continue

        _check(param, value)

        if param.role is ParamRole.CWD:
            cwd = value
        elif param.role is ParamRole.SWITCH:
            trailing.append(param.flag or f"--{param.name}")
        elif param.role is ParamRole.POSITIONAL or param.flag is None:
            positionals.append(str(value))
        elif param.flag.endswith("="):
            trailing.append(f"{param.flag}{value}")
        else:
            trailing.extend([param.flag, str(value)])

    return [*spec.command, *positionals, *trailing], cwd


def build_tool(binary: str, spec: ToolSpec) -> ToolDescriptor:
    """Create the descriptor for ``spec`` running ``binary``."""

    async def execute(
        params: Mapping[str, Any] | None = None,
        *,
        invoker: CommandInvoker | None = None,
    ) -> CommandResult:
        try:
            argv, cwd = build_command(spec, params if params is not None else {})
        except ValidationError as e:
            logger.warning(
                "Tool input rejected",
                extra={"tool_name": spec.name, "reason": e.reason},
            )
            return CommandResult.failure(e.reason)

        runner = invoker or get_default_invoker()
        try:
            return await runner.invoke(binary, argv, cwd)
        except Exception as e:
            logger.error(
                "Invoker raised unexpectedly",
                extra={"tool_name": spec.name, "binary": binary},
                exc_info=True,
            )
            return CommandResult.failure(f"Tool '{spec.name}' failed: {e}")

    execute.__name__ = f"execute_{spec.name}"

    return ToolDescriptor(
        name=spec.name,
        description=spec.description,
        input_schema=build_input_schema(spec),
        execute=execute,
    )
