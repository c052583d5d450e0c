"""
sparkle-ssg CLI

Command-line front end over the adapter registry.

Commands:
    sparkle-ssg list                         - Registered adapters
    sparkle-ssg tools zola                   - Tools of one adapter
    sparkle-ssg probe zola                   - Run the version probe
    sparkle-ssg call zola zola_build -p path=site -p drafts=true
    sparkle-ssg validate path ../etc         - Run one validator
"""

from __future__ import annotations

import asyncio
import json
import sys
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from sparkle_ssg._version import __version__
from sparkle_ssg.adapters.base import Adapter, AdapterSession
from sparkle_ssg.adapters.registry import METADATA, get_adapter, list_adapters
from sparkle_ssg.exceptions import UnknownAdapterError, UnknownToolError
from sparkle_ssg.invoker import InvokerConfig, SafeInvoker
from sparkle_ssg.validation import (
    is_valid_argument,
    is_valid_binary,
    is_valid_interface,
    is_valid_path,
    is_valid_port,
    is_valid_url,
)

VALIDATORS = {
    "path": is_valid_path,
    "argument": is_valid_argument,
    "url": is_valid_url,
    "port": is_valid_port,
    "interface": is_valid_interface,
    "binary": is_valid_binary,
}


def _load(name: str) -> Adapter:
    try:
        return get_adapter(name)
    except UnknownAdapterError as e:
        raise click.ClickException(str(e)) from e


def _is_integer(raw: str) -> bool:
    return raw.isascii() and raw.isdigit()


def _coerce(raw: str, json_type: str | None) -> Any:
    if json_type == "integer" and _is_integer(raw):
        return int(raw)
    if json_type == "boolean" and raw.lower() in ("true", "false"):
        return raw.lower() == "true"
    return raw


def parse_params(pairs: tuple[str, ...], input_schema: dict[str, Any] | None = None) -> dict[str, Any]:
    """Turn ``key=value`` pairs into a params dict.

    Values are converted by the property type in ``input_schema``:
    ``integer`` properties take ASCII digit strings as ints and ``boolean``
    properties take ``true``/``false``. Everything else stays a string,
    and so does a value that does not fit its type, for the tool's own
    validator to reject.
    """
    properties = (input_schema or {}).get("properties", {})
    params: dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"Expected key=value, got '{pair}'", param_hint="--param")
        params[key] = _coerce(value, properties.get(key, {}).get("type"))
    return params


def _session(adapter: Adapter, timeout: float | None) -> AdapterSession:
    config = InvokerConfig.from_env()
    if timeout is not None:
        config = config.model_copy(update={"timeout_seconds": timeout})
    return AdapterSession(adapter, invoker=SafeInvoker(config))


@click.group()
@click.version_option(version=__version__, prog_name="sparkle-ssg")
def app() -> None:
    """sparkle-ssg - safe tool gateway for static site generators"""


@app.command("list")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def list_command(json_output: bool) -> None:
    """List registered adapters."""
    if json_output:
        adapters = [get_adapter(name).info() for name in list_adapters()]
        click.echo(json.dumps({"metadata": METADATA, "adapters": adapters}, indent=2))
        return

    table = Table(title=f"sparkle-ssg {__version__}: {METADATA['count']} adapters")
    table.add_column("Adapter")
    table.add_column("Language")
    table.add_column("Binary")
    table.add_column("Tools", justify="right")
    for name in list_adapters():
        adapter = get_adapter(name)
        table.add_row(name, adapter.language, adapter.binary, str(len(adapter)))
    Console().print(table)


@app.command()
@click.argument("adapter_name")
@click.option("--json", "json_output", is_flag=True, help="Print tool schemas as JSON")
def tools(adapter_name: str, json_output: bool) -> None:
    """Show the tools of an adapter."""
    adapter = _load(adapter_name)
    if json_output:
        click.echo(json.dumps(adapter.schemas(), indent=2))
        return

    table = Table(title=f"{adapter.name} ({adapter.language})")
    table.add_column("Tool")
    table.add_column("Description")
    table.add_column("Required")
    for tool in adapter.tools:
        required = ", ".join(tool.input_schema.get("required", []))
        table.add_row(tool.name, tool.description, required)
    Console().print(table)


@app.command()
@click.argument("adapter_name")
@click.option("--timeout", type=float, default=None, help="Kill the probe after N seconds")
def probe(adapter_name: str, timeout: float | None) -> None:
    """Run an adapter's version probe."""
    adapter = _load(adapter_name)
    session = _session(adapter, timeout)
    connected = asyncio.run(session.connect())

    probe_result = session.state.last_probe
    status = "connected" if connected else "unavailable"
    click.echo(f"{adapter.key}: {status} ({adapter.binary})")
    if probe_result is not None:
        output = (probe_result.stdout or probe_result.stderr).strip()
        if output:
            click.echo(output)
    sys.exit(0 if connected else 1)


@app.command()
@click.argument("adapter_name")
@click.argument("tool_name")
@click.option("--param", "-p", "params", multiple=True, help="Tool parameter as key=value (repeatable)")
@click.option("--timeout", type=float, default=None, help="Kill the command after N seconds")
def call(adapter_name: str, tool_name: str, params: tuple[str, ...], timeout: float | None) -> None:
    """Execute an adapter tool and print the result as JSON."""
    adapter = _load(adapter_name)
    try:
        tool = adapter.get_tool(tool_name)
    except UnknownToolError as e:
        raise click.ClickException(str(e)) from e

    session = _session(adapter, timeout)
    result = asyncio.run(session.call(tool_name, parse_params(params, tool.input_schema)))

    click.echo(result.model_dump_json(indent=2))
    sys.exit(0 if result.success else 1)


@app.command()
@click.argument("kind", type=click.Choice(sorted(VALIDATORS)))
@click.argument("value")
def validate(kind: str, value: str) -> None:
    """Check VALUE with one validator."""
    candidate: Any = int(value) if kind == "port" and _is_integer(value) else value
    valid = VALIDATORS[kind](candidate)
    click.echo("valid" if valid else "invalid")
    sys.exit(0 if valid else 1)


def cli() -> None:
    """Entry point for the sparkle-ssg console script."""
    app()


if __name__ == "__main__":
    cli()
