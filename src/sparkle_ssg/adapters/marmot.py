"""Marmot adapter - small static site generator written in Crystal.

https://github.com/erdnaxeli/marmot
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import SITE_ROOT, new_site_path, output_dir
from sparkle_ssg.tools.models import ToolSpec

ADAPTER = Adapter(
    key="marmot",
    name="Marmot",
    language="Crystal",
    description="Small, fast static site generator written in Crystal",
    homepage="https://github.com/erdnaxeli/marmot",
    binary="marmot",
    tools=[
        ToolSpec(
            name="marmot_init",
            description="Create a new Marmot site",
            command=("init",),
            params=(new_site_path(),),
        ),
        ToolSpec(
            name="marmot_build",
            description="Build the site",
            command=("build",),
            params=(SITE_ROOT, output_dir("--output")),
        ),
        ToolSpec(
            name="marmot_clean",
            description="Remove generated output",
            command=("clean",),
            params=(SITE_ROOT,),
        ),
    ],
)
