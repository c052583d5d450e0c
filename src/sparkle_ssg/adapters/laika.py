"""Laika adapter - Scala site and e-book generator run as sbt tasks.

https://typelevel.org/Laika/
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import SITE_ROOT
from sparkle_ssg.tools.models import ToolSpec

ADAPTER = Adapter(
    key="laika",
    name="Laika",
    language="Scala",
    description="Site and e-book generator for Scala, driven by the sbt plugin",
    homepage="https://typelevel.org/Laika/",
    binary="sbt",
    tools=[
        ToolSpec(
            name="laika_site",
            description="Generate the site",
            command=("laikaSite",),
            params=(SITE_ROOT,),
        ),
        ToolSpec(
            name="laika_html",
            description="Render HTML output only",
            command=("laikaHTML",),
            params=(SITE_ROOT,),
        ),
        ToolSpec(
            name="laika_preview",
            description="Start the preview server",
            command=("laikaPreview",),
            params=(SITE_ROOT,),
        ),
    ],
)
