"""Reggae adapter - meta build system in D, used to drive site builds.

https://github.com/atilaneves/reggae
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import SITE_ROOT
from sparkle_ssg.tools.models import ToolParam, ToolSpec

ADAPTER = Adapter(
    key="reggae",
    name="Reggae",
    language="D",
    description="Meta build system written in D that generates ninja, make or binary backends",
    homepage="https://github.com/atilaneves/reggae",
    binary="reggae",
    tools=[
        ToolSpec(
            name="reggae_configure",
            description="Generate build files from reggaefile.d",
            params=(
                SITE_ROOT,
                ToolParam(
                    "backend",
                    flag="-b",
                    default="ninja",
                    description="Build backend: ninja, make, tup or binary",
                    label="backend",
                ),
            ),
        ),
        ToolSpec(
            name="reggae_help",
            description="Show Reggae usage",
            command=("--help",),
        ),
    ],
)
