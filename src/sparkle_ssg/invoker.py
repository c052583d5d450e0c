"""
Sparkle Safe Invoker

The only place an external process is created. Every call:

1. Validates the binary name (no path separators, optionally the
   argument character ban as well)
2. Validates each argument independently
3. Validates the working directory, if one is given
4. Spawns the binary with the exact argument vector, never via a shell
5. Captures stdout/stderr and the exit status into a CommandResult

Nothing raises to the caller: rejected input, launch failures and
non-zero exits all come back as a CommandResult. Nothing is retried.

Configuration is optional and off by default:
- timeout_seconds: kill the child on expiry (no timeout when None)
- max_output_bytes: truncate captured output
- strict_binary_names: apply the argument character ban to binary names
"""

from __future__ import annotations

import asyncio
import os
import time
from collections.abc import Sequence
from typing import Protocol

from pydantic import BaseModel, Field

from sparkle_ssg.exceptions import ProcessLaunchError
from sparkle_ssg.logging import get_logger
from sparkle_ssg.models import CommandResult
from sparkle_ssg.validation import command_rejection

logger = get_logger("sparkle_ssg.invoker")

_FALSY = {"0", "false", "no", "off"}


def _env_number(name: str, cast):
    """Read a positive number from the environment; ignore unusable values."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        value = cast(raw)
    except ValueError:
        logger.warning("Ignoring malformed %s=%r", name, raw)
        return None
    if value <= 0:
        logger.warning("Ignoring non-positive %s=%r", name, raw)
        return None
    return value


class InvokerConfig(BaseModel):
    """Configuration for the safe invoker."""

    timeout_seconds: float | None = Field(default=None, gt=0)
    max_output_bytes: int | None = Field(default=None, ge=1)
    strict_binary_names: bool = True

    @classmethod
    def from_env(cls) -> InvokerConfig:
        """Build a config from SPARKLE_* environment variables."""
        strict = os.environ.get("SPARKLE_STRICT_BINARY_NAMES", "1")
        return cls(
            timeout_seconds=_env_number("SPARKLE_INVOKE_TIMEOUT", float),
            max_output_bytes=_env_number("SPARKLE_MAX_OUTPUT_BYTES", int),
            strict_binary_names=strict.strip().lower() not in _FALSY,
        )


class CommandInvoker(Protocol):
    """Anything that can run a validated command. Adapters depend on this."""

    async def invoke(
        self, binary: str, args: Sequence[str] = (), cwd: str | None = None
    ) -> CommandResult: ...


class SafeInvoker:
    """Validates a command and runs it as a child process.

    Holds only its configuration; each invoke() owns exactly one child
    process and drops the handle before returning, so concurrent calls
    need no coordination.
    """

    def __init__(self, config: InvokerConfig | None = None):
        self._config = config or InvokerConfig()

    @property
    def config(self) -> InvokerConfig:
        return self._config

    async def invoke(
        self, binary: str, args: Sequence[str] = (), cwd: str | None = None
    ) -> CommandResult:
        """Validate and run ``binary`` with ``args`` in ``cwd``."""
        reason = command_rejection(
            binary, args, cwd, strict_binary=self._config.strict_binary_names
        )
        if reason is not None:
            logger.warning(
                "Command rejected before spawn",
                extra={"binary": binary if isinstance(binary, str) else repr(binary), "reason": reason},
            )
            return CommandResult.failure(reason)

        try:
            return await self._run(binary, list(args), cwd)
        except ProcessLaunchError as e:
            logger.warning(
                "Command failed to launch",
                extra={"binary": binary, "reason": str(e)},
            )
            return CommandResult.failure(str(e))

    async def _run(self, binary: str, args: list[str], cwd: str | None) -> CommandResult:
        cfg = self._config
        start = time.monotonic()

        try:
            proc = await asyncio.create_subprocess_exec(
                binary,
                *args,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=cwd,
            )
        except Exception as e:
            raise ProcessLaunchError(binary, str(e) or "Command execution failed") from e

        try:
            if cfg.timeout_seconds is None:
                stdout, stderr = await proc.communicate()
            else:
                stdout, stderr = await asyncio.wait_for(
                    proc.communicate(),
                    timeout=cfg.timeout_seconds,
                )
        except TimeoutError:
            await _kill(proc)
            logger.warning(
                "Command timed out",
                extra={"binary": binary, "reason": f"timeout {cfg.timeout_seconds}s"},
            )
            return CommandResult.failure(f"Command timed out after {cfg.timeout_seconds}s")
        except asyncio.CancelledError:
            await _kill(proc)
            raise
        except Exception as e:
            await _kill(proc)
            raise ProcessLaunchError(binary, str(e) or "Command execution failed") from e

        code = proc.returncode if proc.returncode is not None else 1
        duration_ms = round((time.monotonic() - start) * 1000, 1)
        logger.debug(
            "Process exited",
            extra={"binary": binary, "exit_code": code, "duration_ms": duration_ms},
        )

        return CommandResult(
            success=code == 0,
            stdout=_decode(stdout, cfg.max_output_bytes),
            stderr=_decode(stderr, cfg.max_output_bytes),
            code=code,
        )


async def _kill(proc: asyncio.subprocess.Process) -> None:
    try:
        proc.kill()
    except ProcessLookupError:
        pass
    await proc.wait()


def _decode(data: bytes | None, limit: int | None) -> str:
    """Decode captured output, keeping at most ``limit`` raw bytes."""
    raw = data or b""
    if limit is not None and len(raw) > limit:
        return raw[:limit].decode("utf-8", errors="replace") + f"\n[TRUNCATED at {limit} bytes]"
    return raw.decode("utf-8", errors="replace")


_default_invoker: SafeInvoker | None = None


def get_default_invoker() -> SafeInvoker:
    """Return the process-wide invoker, configured from the environment."""
    global _default_invoker
    if _default_invoker is None:
        _default_invoker = SafeInvoker(InvokerConfig.from_env())
    return _default_invoker


async def safe_invoke(
    binary: str, args: Sequence[str] = (), cwd: str | None = None
) -> CommandResult:
    """Validate and run a command with the default invoker."""
    return await get_default_invoker().invoke(binary, args, cwd)


def safe_invoke_sync(
    binary: str, args: Sequence[str] = (), cwd: str | None = None
) -> CommandResult:
    """Synchronous wrapper for safe_invoke(). Convenience for scripts.

    Runs its own event loop, so it cannot be called while one is already
    running; raises RuntimeError in that case. Await safe_invoke() there.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        pass
    else:
        raise RuntimeError(
            "safe_invoke_sync() cannot run inside a running event loop; await safe_invoke() instead"
        )
    return asyncio.run(safe_invoke(binary, args, cwd))
