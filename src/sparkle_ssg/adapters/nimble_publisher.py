"""NimblePublisher adapter - Markdown publishing engine for Elixir, run through mix.

https://github.com/dashbitco/nimble_publisher
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import SITE_ROOT, script
from sparkle_ssg.tools.models import ToolSpec

ADAPTER = Adapter(
    key="nimble_publisher",
    name="NimblePublisher",
    language="Elixir",
    description="Minimal filesystem-based publishing engine with Markdown and code highlighting",
    homepage="https://github.com/dashbitco/nimble_publisher",
    binary="mix",
    tools=[
        ToolSpec(
            name="nimble_publisher_deps",
            description="Fetch project dependencies",
            command=("deps.get",),
            params=(SITE_ROOT,),
        ),
        ToolSpec(
            name="nimble_publisher_compile",
            description="Compile the project, rebuilding published content",
            command=("compile",),
            params=(SITE_ROOT,),
        ),
        ToolSpec(
            name="nimble_publisher_build",
            description="Run the site build script",
            command=("run",),
            params=(SITE_ROOT, script("priv/build.exs", "Build script to run")),
        ),
    ],
)
