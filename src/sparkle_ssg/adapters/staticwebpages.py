"""StaticWebPages.jl adapter - academic personal websites from Julia.

https://github.com/Humans-of-Julia/StaticWebPages.jl
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import SITE_ROOT, script
from sparkle_ssg.tools.models import ToolSpec

ADAPTER = Adapter(
    key="staticwebpages",
    name="StaticWebPages.jl",
    language="Julia",
    description="Black-box generator for academic personal websites written in Julia",
    homepage="https://github.com/Humans-of-Julia/StaticWebPages.jl",
    binary="julia",
    tools=[
        ToolSpec(
            name="staticwebpages_build",
            description="Run the site's content script to export pages",
            command=("--project",),
            params=(SITE_ROOT, script("content.jl", "Content script")),
        ),
    ],
)
