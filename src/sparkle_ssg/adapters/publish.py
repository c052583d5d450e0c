"""Publish adapter - static site generator for Swift developers.

https://github.com/JohnSundell/Publish
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import SITE_ROOT, port
from sparkle_ssg.tools.models import ToolSpec

ADAPTER = Adapter(
    key="publish",
    name="Publish",
    language="Swift",
    description="Static site generator built for Swift developers, with themes as Swift code",
    homepage="https://github.com/JohnSundell/Publish",
    binary="publish",
    version_args=("help",),
    tools=[
        ToolSpec(
            name="publish_new",
            description="Set up a new website in the given directory",
            command=("new",),
            params=(SITE_ROOT,),
        ),
        ToolSpec(
            name="publish_generate",
            description="Generate the website",
            command=("generate",),
            params=(SITE_ROOT,),
        ),
        ToolSpec(
            name="publish_run",
            description="Generate and run a local server",
            command=("run",),
            params=(SITE_ROOT, port(description="Port number (default: 8000)")),
        ),
        ToolSpec(
            name="publish_deploy",
            description="Generate and deploy the website",
            command=("deploy",),
            params=(SITE_ROOT,),
        ),
    ],
)
