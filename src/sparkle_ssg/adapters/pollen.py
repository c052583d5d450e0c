"""Pollen adapter - Racket publishing system for digital books, run through raco.

https://docs.racket-lang.org/pollen/
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.tools.models import ParamKind, ParamRole, ToolParam, ToolSpec

PROJECT_DIR = ToolParam(
    "path",
    kind=ParamKind.PATH,
    role=ParamRole.POSITIONAL,
    description="Project directory",
    label="path",
)

ADAPTER = Adapter(
    key="pollen",
    name="Pollen",
    language="Racket",
    description="Publishing system for web-based books built on Racket",
    homepage="https://docs.racket-lang.org/pollen/",
    binary="raco",
    version_args=("pkg", "show", "pollen"),
    tools=[
        ToolSpec(
            name="pollen_start",
            description="Start the project server",
            command=("pollen", "start"),
            params=(
                PROJECT_DIR,
                ToolParam(
                    "port",
                    kind=ParamKind.PORT,
                    role=ParamRole.POSITIONAL,
                    description="Port number (default: 8080)",
                    label="port number",
                ),
            ),
        ),
        ToolSpec(
            name="pollen_render",
            description="Render the project's source files",
            command=("pollen", "render"),
            params=(PROJECT_DIR,),
        ),
        ToolSpec(
            name="pollen_publish",
            description="Copy rendered output to a publish directory",
            command=("pollen", "publish"),
            params=(
                PROJECT_DIR,
                ToolParam(
                    "dest",
                    kind=ParamKind.PATH,
                    role=ParamRole.POSITIONAL,
                    description="Destination directory",
                    label="destination",
                ),
            ),
        ),
        ToolSpec(
            name="pollen_reset",
            description="Reset the render cache",
            command=("pollen", "reset"),
            params=(PROJECT_DIR,),
        ),
    ],
)
