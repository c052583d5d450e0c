"""Cobalt adapter - straightforward static site generator written in Rust.

https://cobalt-org.github.io/
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import DRAFTS, SITE_ROOT, interface, new_site_path, output_dir, port
from sparkle_ssg.tools.models import ToolSpec

ADAPTER = Adapter(
    key="cobalt",
    name="Cobalt",
    language="Rust",
    description="Straightforward static site generator written in Rust",
    homepage="https://cobalt-org.github.io/",
    binary="cobalt",
    tools=[
        ToolSpec(
            name="cobalt_init",
            description="Create a new Cobalt site",
            command=("init",),
            params=(new_site_path(),),
        ),
        ToolSpec(
            name="cobalt_build",
            description="Build the site",
            command=("build",),
            params=(SITE_ROOT, output_dir("--destination"), DRAFTS),
        ),
        ToolSpec(
            name="cobalt_serve",
            description="Build, serve and watch the site",
            command=("serve",),
            params=(
                SITE_ROOT,
                port(description="Port number (default: 3000)"),
                interface("--host", "Host to bind to"),
                DRAFTS,
            ),
        ),
        ToolSpec(
            name="cobalt_clean",
            description="Remove the generated site",
            command=("clean",),
            params=(SITE_ROOT,),
        ),
    ],
)
