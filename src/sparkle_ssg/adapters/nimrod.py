"""Nimrod adapter - static site generator written in Nim."""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import DRAFTS, SITE_ROOT, new_site_path, output_dir, port
from sparkle_ssg.tools.models import ToolSpec

ADAPTER = Adapter(
    key="nimrod",
    name="Nimrod",
    language="Nim",
    description="Static site generator written in Nim, compiled to a single native binary",
    binary="nimrod",
    tools=[
        ToolSpec(
            name="nimrod_init",
            description="Create a new site",
            command=("init",),
            params=(new_site_path(),),
        ),
        ToolSpec(
            name="nimrod_build",
            description="Build the site",
            command=("build",),
            params=(SITE_ROOT, output_dir("--output"), DRAFTS),
        ),
        ToolSpec(
            name="nimrod_serve",
            description="Serve the site locally",
            command=("serve",),
            params=(SITE_ROOT, port()),
        ),
    ],
)
