"""Wub adapter - pure-Tcl web server and site engine.

https://wiki.tcl-lang.org/page/Wub
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import SITE_ROOT, script
from sparkle_ssg.tools.models import ToolSpec

# tclsh has no version flag; with stdin closed it exits 0 when present
ADAPTER = Adapter(
    key="wub",
    name="Wub",
    language="Tcl",
    description="Pure-Tcl HTTP/1.1 server and site engine",
    homepage="https://wiki.tcl-lang.org/page/Wub",
    binary="tclsh",
    version_args=(),
    tools=[
        ToolSpec(
            name="wub_start",
            description="Start the Wub server",
            params=(SITE_ROOT, script("Wub.tcl", "Server entry script")),
        ),
    ],
)
