"""
Sparkle Command Models

Pydantic models for the process boundary: what goes into the safe
invoker and what comes back out. Every outcome, including rejected
input and launch failures, is reported as a CommandResult.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from sparkle_ssg.validation import command_rejection

# Exit code reported when no process ran or the launch itself failed
VALIDATION_FAILURE_CODE = 1


class CommandRequest(BaseModel):
    """A single external command: binary name, argument vector, working directory."""

    binary: str
    args: list[str] = Field(default_factory=list)
    cwd: str | None = None

    def validate_request(self, strict_binary: bool = True) -> str | None:
        """Return the reason this request must not be spawned, or None."""
        return command_rejection(self.binary, self.args, self.cwd, strict_binary=strict_binary)


class CommandResult(BaseModel):
    """Outcome of one invocation.

    ``success`` is True only when a process ran and exited 0.
    Validation failures always carry ``code=1`` and never spawn anything.
    """

    success: bool
    stdout: str = ""
    stderr: str = ""
    code: int = 0

    @classmethod
    def failure(cls, reason: str, code: int = VALIDATION_FAILURE_CODE) -> CommandResult:
        return cls(success=False, stdout="", stderr=reason, code=code)
