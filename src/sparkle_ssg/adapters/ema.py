"""Ema adapter - Haskell static site generator with hot reload, run through cabal.

https://ema.srid.ca/
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import SITE_ROOT
from sparkle_ssg.tools.models import ParamRole, ToolParam, ToolSpec

TARGET = ToolParam(
    "target",
    role=ParamRole.POSITIONAL,
    description="Cabal target of the site executable",
    label="target",
)

ADAPTER = Adapter(
    key="ema",
    name="Ema",
    language="Haskell",
    description="Static site generator library for Haskell with hot reload",
    homepage="https://ema.srid.ca/",
    binary="cabal",
    tools=[
        ToolSpec(
            name="ema_build",
            description="Compile the site executable",
            command=("build",),
            params=(SITE_ROOT, TARGET),
        ),
        ToolSpec(
            name="ema_run",
            description="Run the site executable (live server)",
            command=("run",),
            params=(SITE_ROOT, TARGET),
        ),
    ],
)
