"""Zotonic adapter - Erlang web framework and CMS.

https://zotonic.com/
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.tools.models import ParamRole, ToolParam, ToolSpec

ADAPTER = Adapter(
    key="zotonic",
    name="Zotonic",
    language="Erlang",
    description="High-speed, real-time web framework and CMS built on Erlang",
    homepage="https://zotonic.com/",
    binary="zotonic",
    version_args=("status",),
    tools=[
        ToolSpec(name="zotonic_start", description="Start the Zotonic server", command=("start",)),
        ToolSpec(name="zotonic_stop", description="Stop the Zotonic server", command=("stop",)),
        ToolSpec(name="zotonic_status", description="Show server status", command=("status",)),
        ToolSpec(
            name="zotonic_addsite",
            description="Create a new site",
            command=("addsite",),
            params=(
                ToolParam(
                    "skeleton",
                    flag="-s",
                    description="Site skeleton, e.g. blog or empty",
                    label="skeleton",
                ),
                ToolParam(
                    "site",
                    role=ParamRole.POSITIONAL,
                    required=True,
                    description="Site name",
                    label="site name",
                ),
            ),
        ),
    ],
)
