"""Shared test fixtures for the sparkle-ssg test suite."""

from collections.abc import Sequence

import pytest

from sparkle_ssg.adapters.registry import get_adapter
from sparkle_ssg.invoker import InvokerConfig, SafeInvoker
from sparkle_ssg.models import CommandResult


class RecordingInvoker:
    """Stands in for SafeInvoker; records every command instead of spawning it."""

    def __init__(self, result: CommandResult | None = None):
        self.calls: list[tuple[str, list[str], str | None]] = []
        self.result = result or CommandResult(success=True, stdout="ok\n", stderr="", code=0)

    async def invoke(
        self, binary: str, args: Sequence[str] = (), cwd: str | None = None
    ) -> CommandResult:
        self.calls.append((binary, list(args), cwd))
        return self.result


class RaisingInvoker:
    """An invoker that breaks its contract, for testing the outer guards."""

    async def invoke(self, binary, args=(), cwd=None):
        raise RuntimeError("invoker exploded")


@pytest.fixture
def recording_invoker():
    return RecordingInvoker()


@pytest.fixture
def raising_invoker():
    return RaisingInvoker()


@pytest.fixture
def invoker():
    return SafeInvoker()


@pytest.fixture
def lenient_invoker():
    return SafeInvoker(InvokerConfig(strict_binary_names=False))


@pytest.fixture
def zola():
    return get_adapter("zola")
