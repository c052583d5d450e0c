"""Hakyll adapter - Haskell library for generating static sites.

Hakyll sites compile into their own executable, conventionally named
``site`` and run through stack.

https://jaspervdj.be/hakyll/
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import SITE_ROOT, interface, port
from sparkle_ssg.tools.models import ToolSpec

_SITE = ("exec", "site", "--")

ADAPTER = Adapter(
    key="hakyll",
    name="Hakyll",
    language="Haskell",
    description="Haskell library for generating static sites, in the spirit of xmonad",
    homepage="https://jaspervdj.be/hakyll/",
    binary="stack",
    tools=[
        ToolSpec(
            name="hakyll_build",
            description="Generate the site",
            command=(*_SITE, "build"),
            params=(SITE_ROOT,),
        ),
        ToolSpec(
            name="hakyll_rebuild",
            description="Clean and build again",
            command=(*_SITE, "rebuild"),
            params=(SITE_ROOT,),
        ),
        ToolSpec(
            name="hakyll_watch",
            description="Autocompile on changes and start a preview server",
            command=(*_SITE, "watch"),
            params=(
                SITE_ROOT,
                port(description="Port number (default: 8000)"),
                interface("--host", "Host to bind to"),
            ),
        ),
        ToolSpec(
            name="hakyll_check",
            description="Validate the site output",
            command=(*_SITE, "check"),
            params=(SITE_ROOT,),
        ),
        ToolSpec(
            name="hakyll_clean",
            description="Clean up and remove cache",
            command=(*_SITE, "clean"),
            params=(SITE_ROOT,),
        ),
    ],
)
