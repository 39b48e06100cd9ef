"""Errors raised by tailwind-cli.

Every invocation failure derives from TailwindCliError and carries whatever
stdout/stderr was captured, so callers can surface the tool's own
diagnostics.
"""

from __future__ import annotations


class TailwindCliError(Exception):
    """Base class for Tailwind CLI invocation failures."""

    def __init__(self, message: str, stdout: str = "", stderr: str = "") -> None:
        super().__init__(message)
        self.stdout = stdout
        self.stderr = stderr


class TailwindCliLaunchError(TailwindCliError):
    """The executable could not be started (missing, not executable, ...)."""

    def __init__(self, executable: str, reason: str) -> None:
        self.executable = executable
        self.reason = reason
        super().__init__(f"Couldn't invoke Tailwind CLI ({executable}): {reason}")


class TailwindCliExecutionError(TailwindCliError):
    """The executable ran and exited with a non-zero status."""

    def __init__(
        self,
        stdout: str,
        stderr: str,
        returncode: int,
        command: tuple[str, ...] = (),
    ) -> None:
        self.returncode = returncode
        self.command = tuple(command)
        message = (
            f"Tailwind CLI returned an error (exit code {returncode}):\n\n"
            f"stdout:\n{stdout.strip()}\n\n"
            f"stderr:\n{stderr.strip()}\n"
        )
        super().__init__(message, stdout=stdout, stderr=stderr)


class UnsupportedPlatformError(TailwindCliError):
    """No standalone Tailwind build exists for this OS/architecture."""

    def __init__(self, system: str, machine: str) -> None:
        self.system = system
        self.machine = machine
        super().__init__(f"Unsupported platform: {system}/{machine}")
