"""Perun adapter - composable static site generator for Clojure built on Boot.

https://perun.io/
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import SITE_ROOT
from sparkle_ssg.tools.models import ToolSpec

ADAPTER = Adapter(
    key="perun",
    name="Perun",
    language="Clojure",
    description="Composable static site generator built as Boot tasks",
    homepage="https://perun.io/",
    binary="boot",
    tools=[
        ToolSpec(
            name="perun_build",
            description="Run the build task defined in build.boot",
            command=("build",),
            params=(SITE_ROOT,),
        ),
        ToolSpec(
            name="perun_dev",
            description="Run the dev task (build, watch and serve)",
            command=("dev",),
            params=(SITE_ROOT,),
        ),
    ],
)
