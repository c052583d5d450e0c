"""Cryogen adapter - simple static site generator for Clojure, run through Leiningen.

https://cryogenweb.org/
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import SITE_ROOT
from sparkle_ssg.tools.models import ParamKind, ParamRole, ToolParam, ToolSpec

ADAPTER = Adapter(
    key="cryogen",
    name="Cryogen",
    language="Clojure",
    description="Simple static site generator built with Clojure and Leiningen",
    homepage="https://cryogenweb.org/",
    binary="lein",
    version_args=("version",),
    tools=[
        ToolSpec(
            name="cryogen_init",
            description="Create a new Cryogen site from the Leiningen template",
            command=("new", "cryogen"),
            params=(
                ToolParam(
                    "name",
                    role=ParamRole.POSITIONAL,
                    required=True,
                    description="Project name",
                    label="project name",
                ),
                ToolParam(
                    "parent",
                    kind=ParamKind.PATH,
                    role=ParamRole.CWD,
                    description="Directory to create the project in",
                    label="path",
                ),
            ),
        ),
        ToolSpec(
            name="cryogen_build",
            description="Compile the site",
            command=("run",),
            params=(SITE_ROOT,),
        ),
        ToolSpec(
            name="cryogen_serve",
            description="Start the development server with live reload",
            command=("serve",),
            params=(SITE_ROOT,),
        ),
    ],
)
