"""Result types for Tailwind CLI invocations."""

from __future__ import annotations

from dataclasses import dataclass

from tailwind_cli.infra.tools.command_runner import CommandResult


@dataclass(frozen=True)
class TailwindCliOutput:
    """Captured output of a successful Tailwind CLI run.

    stdout and stderr hold the tool's output exactly as written (decoded as
    UTF-8, invalid bytes replaced). Tailwind prints its progress messages to
    stderr, so a non-empty stderr does not indicate failure.

    Attributes:
        stdout: Captured standard output.
        stderr: Captured standard error.
        returncode: Exit status; always 0 for a successful run.
        command: Full argv that was spawned.
        duration_seconds: Wall-clock time of the run.
    """

    stdout: str
    stderr: str
    returncode: int = 0
    command: tuple[str, ...] = ()
    duration_seconds: float = 0.0

    @classmethod
    def from_result(cls, result: CommandResult) -> TailwindCliOutput:
        return cls(
            stdout=result.stdout,
            stderr=result.stderr,
            returncode=result.returncode,
            command=result.command,
            duration_seconds=result.duration_seconds,
        )

    @property
    def stdout_text(self) -> str:
        """stdout with surrounding whitespace removed."""
        return self.stdout.strip()

    @property
    def stderr_text(self) -> str:
        """stderr with surrounding whitespace removed."""
        return self.stderr.strip()
