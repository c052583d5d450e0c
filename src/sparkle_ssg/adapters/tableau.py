"""Tableau adapter - static site generator for Elixir.

https://github.com/elixir-tools/tableau
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import SITE_ROOT
from sparkle_ssg.tools.models import ToolSpec

ADAPTER = Adapter(
    key="tableau",
    name="Tableau",
    language="Elixir",
    description="Static site generator for Elixir with live reload",
    homepage="https://github.com/elixir-tools/tableau",
    binary="mix",
    tools=[
        ToolSpec(
            name="tableau_build",
            description="Build the site",
            command=("tableau.build",),
            params=(SITE_ROOT,),
        ),
        ToolSpec(
            name="tableau_server",
            description="Start the development server",
            command=("tableau.server",),
            params=(SITE_ROOT,),
        ),
    ],
)
