"""YOCaml adapter - OCaml static site generator library, run through dune.

https://github.com/xhtmlboi/yocaml
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import SITE_ROOT
from sparkle_ssg.tools.models import ParamRole, ToolParam, ToolSpec

ADAPTER = Adapter(
    key="yocaml",
    name="YOCaml",
    language="OCaml",
    description="Static blog generator framework written in OCaml",
    homepage="https://github.com/xhtmlboi/yocaml",
    binary="dune",
    tools=[
        ToolSpec(
            name="yocaml_build",
            description="Compile the site generator",
            command=("build",),
            params=(SITE_ROOT,),
        ),
        ToolSpec(
            name="yocaml_exec",
            description="Run the compiled generator executable",
            command=("exec",),
            params=(
                SITE_ROOT,
                ToolParam(
                    "target",
                    role=ParamRole.POSITIONAL,
                    required=True,
                    description="Executable to run, e.g. ./bin/blog.exe",
                    label="target",
                ),
            ),
        ),
    ],
)
