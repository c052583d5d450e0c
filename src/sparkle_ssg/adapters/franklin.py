"""Franklin.jl adapter - static site generator for technical blogging in Julia.

Franklin is driven from Julia code, so tools run a site script with
``julia --project`` rather than inline expressions.

https://franklinjl.org/
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import SITE_ROOT, script
from sparkle_ssg.tools.models import ToolSpec

ADAPTER = Adapter(
    key="franklin",
    name="Franklin.jl",
    language="Julia",
    description="Static site generator geared to technical blogging, with LaTeX and live evaluation",
    homepage="https://franklinjl.org/",
    binary="julia",
    tools=[
        ToolSpec(
            name="franklin_build",
            description="Run the site's build script (calls Franklin.optimize)",
            command=("--project",),
            params=(SITE_ROOT, script("build.jl", "Build script")),
        ),
        ToolSpec(
            name="franklin_serve",
            description="Run the site's serve script (calls Franklin.serve)",
            command=("--project",),
            params=(SITE_ROOT, script("serve.jl", "Serve script")),
        ),
    ],
)
