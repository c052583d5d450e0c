"""Frog adapter - static blog generator in Racket, run through raco.

https://github.com/greghendershott/frog
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import SITE_ROOT, port
from sparkle_ssg.tools.models import ToolSpec

ADAPTER = Adapter(
    key="frog",
    name="Frog",
    language="Racket",
    description="Static blog generator in Racket with Markdown, Scribble and Bootstrap",
    homepage="https://github.com/greghendershott/frog",
    binary="raco",
    version_args=("pkg", "show", "frog"),
    tools=[
        ToolSpec(
            name="frog_init",
            description="Create a starter project in the given directory",
            command=("frog", "--init"),
            params=(SITE_ROOT,),
        ),
        ToolSpec(
            name="frog_build",
            description="Build the blog",
            command=("frog", "--build"),
            params=(SITE_ROOT,),
        ),
        ToolSpec(
            name="frog_preview",
            description="Build and preview the blog in a local server",
            command=("frog", "--preview"),
            params=(SITE_ROOT, port()),
        ),
        ToolSpec(
            name="frog_clean",
            description="Delete generated files",
            command=("frog", "--clean"),
            params=(SITE_ROOT,),
        ),
    ],
)
