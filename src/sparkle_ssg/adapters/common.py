"""Parameters shared by many adapter tables."""

from __future__ import annotations

from sparkle_ssg.tools.models import ParamKind, ParamRole, ToolParam

SITE_ROOT = ToolParam(
    "path",
    kind=ParamKind.PATH,
    role=ParamRole.CWD,
    description="Path to site root",
    label="path",
)

DRAFTS = ToolParam(
    "drafts",
    kind=ParamKind.FLAG,
    role=ParamRole.SWITCH,
    flag="--drafts",
    description="Include drafts",
)


def new_site_path(description: str = "Path for the new site") -> ToolParam:
    return ToolParam(
        "path",
        kind=ParamKind.PATH,
        role=ParamRole.POSITIONAL,
        required=True,
        description=description,
        label="path",
    )


def port(flag: str = "--port", description: str = "Port number") -> ToolParam:
    return ToolParam(
        "port",
        kind=ParamKind.PORT,
        flag=flag,
        description=description,
        label="port number",
    )


def interface(flag: str = "--interface", description: str = "Interface to bind to") -> ToolParam:
    return ToolParam(
        "interface",
        kind=ParamKind.INTERFACE,
        flag=flag,
        description=description,
        label="interface",
    )


def output_dir(flag: str, description: str = "Output directory") -> ToolParam:
    return ToolParam(
        "outputDir",
        kind=ParamKind.PATH,
        flag=flag,
        description=description,
        label="output directory",
    )


def script(default: str, description: str) -> ToolParam:
    return ToolParam(
        "script",
        kind=ParamKind.PATH,
        role=ParamRole.POSITIONAL,
        default=default,
        description=description,
        label="script path",
    )
