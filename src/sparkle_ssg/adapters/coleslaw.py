"""Coleslaw adapter - flexible blog and site generator in Common Lisp.

https://github.com/coleslaw-org/coleslaw
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import SITE_ROOT, new_site_path
from sparkle_ssg.tools.models import ToolSpec

ADAPTER = Adapter(
    key="coleslaw",
    name="Coleslaw",
    language="Common Lisp",
    description="Flexible Lisp blogware with a command-line front end via Roswell",
    homepage="https://github.com/coleslaw-org/coleslaw",
    binary="coleslaw",
    tools=[
        ToolSpec(
            name="coleslaw_setup",
            description="Write a default .coleslawrc into a new site directory",
            command=("setup",),
            params=(new_site_path(),),
        ),
        ToolSpec(
            name="coleslaw_generate",
            description="Generate the site",
            command=("generate",),
            params=(SITE_ROOT,),
        ),
        ToolSpec(
            name="coleslaw_preview",
            description="Generate and preview the site locally",
            command=("preview",),
            params=(SITE_ROOT,),
        ),
    ],
)
