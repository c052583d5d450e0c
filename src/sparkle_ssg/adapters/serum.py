"""Serum adapter - simple static website generator written in Elixir.

https://dalgona.github.io/Serum/
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import SITE_ROOT, new_site_path, output_dir, port
from sparkle_ssg.tools.models import ToolSpec

ADAPTER = Adapter(
    key="serum",
    name="Serum",
    language="Elixir",
    description="Simple static website generator written in Elixir",
    homepage="https://dalgona.github.io/Serum/",
    binary="mix",
    tools=[
        ToolSpec(
            name="serum_new",
            description="Create a new Serum project",
            command=("serum.new",),
            params=(new_site_path(),),
        ),
        ToolSpec(
            name="serum_build",
            description="Build the website",
            command=("serum.build",),
            params=(SITE_ROOT, output_dir("--output")),
        ),
        ToolSpec(
            name="serum_server",
            description="Start the development server",
            command=("serum.server",),
            params=(SITE_ROOT, port(description="Port number (default: 8080)")),
        ),
    ],
)
