"""mdBook adapter - create books from Markdown files, written in Rust.

https://rust-lang.github.io/mdBook/
"""

from __future__ import annotations

from sparkle_ssg.adapters.base import Adapter
from sparkle_ssg.adapters.common import new_site_path, output_dir, port
from sparkle_ssg.tools.models import ParamKind, ParamRole, ToolParam, ToolSpec

BOOK_ROOT = ToolParam(
    "path",
    kind=ParamKind.PATH,
    role=ParamRole.POSITIONAL,
    description="Path to the book root",
    label="path",
)

ADAPTER = Adapter(
    key="mdbook",
    name="mdBook",
    language="Rust",
    description="Create modern online books from Markdown files",
    homepage="https://rust-lang.github.io/mdBook/",
    binary="mdbook",
    tools=[
        ToolSpec(
            name="mdbook_init",
            description="Create a new book",
            command=("init",),
            params=(
                new_site_path("Directory for the new book"),
                ToolParam("title", flag="--title", description="Book title", label="title"),
                ToolParam(
                    "force",
                    kind=ParamKind.FLAG,
                    role=ParamRole.SWITCH,
                    flag="--force",
                    description="Skip confirmation prompts",
                ),
            ),
        ),
        ToolSpec(
            name="mdbook_build",
            description="Build the book",
            command=("build",),
            params=(BOOK_ROOT, output_dir("--dest-dir")),
        ),
        ToolSpec(
            name="mdbook_serve",
            description="Serve the book and rebuild on changes",
            command=("serve",),
            params=(
                BOOK_ROOT,
                port("--port", "Port number (default: 3000)"),
                ToolParam(
                    "hostname",
                    kind=ParamKind.INTERFACE,
                    flag="--hostname",
                    description="Hostname to listen on",
                    label="hostname",
                ),
                ToolParam(
                    "open",
                    kind=ParamKind.FLAG,
                    role=ParamRole.SWITCH,
                    flag="--open",
                    description="Open the book in a browser",
                ),
            ),
        ),
        ToolSpec(
            name="mdbook_test",
            description="Test the Rust code samples in the book",
            command=("test",),
            params=(BOOK_ROOT,),
        ),
        ToolSpec(
            name="mdbook_clean",
            description="Delete the built book",
            command=("clean",),
            params=(BOOK_ROOT,),
        ),
    ],
)
