"""Babashka adapter - sites driven by bb tasks in Clojure.

https://babashka.org/
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import SITE_ROOT
from sparkle_ssg.tools.models import ParamRole, ToolParam, ToolSpec

ADAPTER = Adapter(
    key="babashka",
    name="Babashka",
    language="Clojure",
    description="Fast native Clojure scripting runtime; sites are built through bb tasks",
    homepage="https://babashka.org/",
    binary="bb",
    tools=[
        ToolSpec(
            name="babashka_tasks",
            description="List the tasks defined in bb.edn",
            command=("tasks",),
            params=(SITE_ROOT,),
        ),
        ToolSpec(
            name="babashka_run",
            description="Run a bb task such as build or serve",
            command=("run",),
            params=(
                SITE_ROOT,
                ToolParam(
                    "task",
                    role=ParamRole.POSITIONAL,
                    required=True,
                    description="Task name from bb.edn",
                    label="task name",
                ),
            ),
        ),
    ],
)
