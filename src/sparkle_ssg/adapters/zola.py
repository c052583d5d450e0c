"""Zola adapter - fast static site generator written in Rust.

https://www.getzola.org/
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import DRAFTS, SITE_ROOT, interface, new_site_path, output_dir, port
from sparkle_ssg.tools.models import ParamKind, ParamRole, ToolParam, ToolSpec

ADAPTER = Adapter(
    key="zola",
    name="Zola",
    language="Rust",
    description=(
        "Fast static site generator written in Rust with built-in Sass "
        "compilation and syntax highlighting"
    ),
    homepage="https://www.getzola.org/",
    binary="zola",
    tools=[
        ToolSpec(
            name="zola_init",
            description="Initialize a new Zola site",
            command=("init",),
            params=(
                new_site_path(),
                ToolParam(
                    "force",
                    kind=ParamKind.FLAG,
                    role=ParamRole.SWITCH,
                    flag="--force",
                    description="Overwrite existing directory",
                ),
            ),
        ),
        ToolSpec(
            name="zola_build",
            description="Build the Zola site",
            command=("build",),
            params=(
                SITE_ROOT,
                ToolParam(
                    "baseUrl",
                    kind=ParamKind.URL,
                    flag="--base-url",
                    description="Base URL for the site",
                    label="base URL",
                ),
                output_dir("--output-dir"),
                DRAFTS,
            ),
        ),
        ToolSpec(
            name="zola_serve",
            description="Start Zola development server",
            command=("serve",),
            params=(
                SITE_ROOT,
                port(description="Port number (default: 1111)"),
                interface(),
                DRAFTS,
                ToolParam(
                    "openBrowser",
                    kind=ParamKind.FLAG,
                    role=ParamRole.SWITCH,
                    flag="--open",
                    description="Open browser automatically",
                ),
            ),
        ),
        ToolSpec(
            name="zola_check",
            description="Check the site for errors",
            command=("check",),
            params=(SITE_ROOT, DRAFTS),
        ),
        ToolSpec(
            name="zola_version",
            description="Get Zola version",
            command=("--version",),
        ),
    ],
)
