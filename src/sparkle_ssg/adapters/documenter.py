"""Documenter.jl adapter - documentation generator for Julia packages.

https://documenter.juliadocs.org/
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import SITE_ROOT, script
from sparkle_ssg.tools.models import ToolSpec

ADAPTER = Adapter(
    key="documenter",
    name="Documenter.jl",
    language="Julia",
    description="Documentation generator for Julia packages",
    homepage="https://documenter.juliadocs.org/",
    binary="julia",
    tools=[
        ToolSpec(
            name="documenter_build",
            description="Build the documentation with docs/make.jl",
            command=("--project=docs",),
            params=(SITE_ROOT, script("docs/make.jl", "Documentation build script")),
        ),
    ],
)
