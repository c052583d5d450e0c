"""Scalatex adapter - Scala document generator run through sbt.

https://github.com/com-lihaoyi/Scalatex
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import SITE_ROOT
from sparkle_ssg.tools.models import ToolSpec

ADAPTER = Adapter(
    key="scalatex",
    name="Scalatex",
    language="Scala",
    description="Programmable, typechecked document generator for Scala",
    homepage="https://github.com/com-lihaoyi/Scalatex",
    binary="sbt",
    tools=[
        ToolSpec(
            name="scalatex_compile",
            description="Compile the documents",
            command=("compile",),
            params=(SITE_ROOT,),
        ),
        ToolSpec(
            name="scalatex_run",
            description="Render the documents to HTML",
            command=("run",),
            params=(SITE_ROOT,),
        ),
    ],
)
