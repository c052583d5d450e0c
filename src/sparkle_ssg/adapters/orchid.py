"""Orchid adapter - Kotlin static site generator run through Gradle.

https://orchid.run/
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import SITE_ROOT, port
from sparkle_ssg.tools.models import ToolSpec

ADAPTER = Adapter(
    key="orchid",
    name="Orchid",
    language="Kotlin",
    description="Static site generator for documentation, blogs and wikis, run as Gradle tasks",
    homepage="https://orchid.run/",
    binary="gradle",
    tools=[
        ToolSpec(
            name="orchid_build",
            description="Build the site",
            command=("orchidBuild",),
            params=(SITE_ROOT,),
        ),
        ToolSpec(
            name="orchid_serve",
            description="Build and serve the site with live reload",
            command=("orchidServe",),
            params=(SITE_ROOT, port("-PorchidPort=", "Port number (default: 8080)")),
        ),
        ToolSpec(
            name="orchid_deploy",
            description="Build and deploy the site",
            command=("orchidDeploy",),
            params=(SITE_ROOT,),
        ),
    ],
)
