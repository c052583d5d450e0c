"""Fornax adapter - scriptable static site generator for F#.

https://github.com/ionide/Fornax
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import SITE_ROOT
from sparkle_ssg.tools.models import ToolSpec

ADAPTER = Adapter(
    key="fornax",
    name="Fornax",
    language="F#",
    description="Scriptable static site generator using F# type-safe DSL templates",
    homepage="https://github.com/ionide/Fornax",
    binary="fornax",
    tools=[
        ToolSpec(
            name="fornax_new",
            description="Scaffold a new site in the given directory",
            command=("new",),
            params=(SITE_ROOT,),
        ),
        ToolSpec(
            name="fornax_build",
            description="Build the site",
            command=("build",),
            params=(SITE_ROOT,),
        ),
        ToolSpec(
            name="fornax_watch",
            description="Build, serve and rebuild on changes",
            command=("watch",),
            params=(SITE_ROOT,),
        ),
        ToolSpec(
            name="fornax_clean",
            description="Remove generated output",
            command=("clean",),
            params=(SITE_ROOT,),
        ),
    ],
)
