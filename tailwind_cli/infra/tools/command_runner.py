"""Standardized synchronous subprocess execution.

CommandRunner spawns a process, waits for it to exit and captures both
output streams in full. Spawn failures (missing binary, permission denied,
NUL bytes in an argument) are reported through the result instead of
raising, so callers only have a single value to inspect.
"""

from __future__ import annotations

import logging
import os
import subprocess
import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# Exit code reported when the process could not be started (shell convention)
LAUNCH_FAILURE_EXIT_CODE = 127

# Defaults for tail helpers
DEFAULT_TAIL_CHARS = 800
DEFAULT_TAIL_LINES = 20

Argument = str | os.PathLike[str]


def _tail(text: str, max_chars: int, max_lines: int) -> str:
    """Return the last max_lines lines of text, capped at max_chars."""
    if not text:
        return ""
    lines = text.splitlines()
    tail = "\n".join(lines[-max_lines:])
    if len(tail) > max_chars:
        tail = tail[-max_chars:]
    return tail


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a single process execution.

    Attributes:
        command: Full argv that was spawned.
        returncode: Process exit status, or LAUNCH_FAILURE_EXIT_CODE when the
            process could not be started.
        stdout: Captured standard output (lossy UTF-8 decode).
        stderr: Captured standard error (lossy UTF-8 decode).
        duration_seconds: Wall-clock time spent spawning and waiting.
        launch_error: OS error text when the process could not be started.
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""
    duration_seconds: float = 0.0
    launch_error: str | None = None

    @property
    def ok(self) -> bool:
        return self.launch_error is None and self.returncode == 0

    @property
    def launched(self) -> bool:
        return self.launch_error is None

    def stdout_tail(
        self, max_chars: int = DEFAULT_TAIL_CHARS, max_lines: int = DEFAULT_TAIL_LINES
    ) -> str:
        return _tail(self.stdout, max_chars, max_lines)

    def stderr_tail(
        self, max_chars: int = DEFAULT_TAIL_CHARS, max_lines: int = DEFAULT_TAIL_LINES
    ) -> str:
        return _tail(self.stderr, max_chars, max_lines)


class CommandRunner:
    """Runs commands synchronously with a fixed working directory and env.

    Args:
        cwd: Working directory for spawned processes. None inherits the
            caller's working directory.
        env: Extra environment variables layered over os.environ.
    """

    def __init__(
        self,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        self.cwd = cwd
        self.env = dict(env) if env else {}

    def _merged_env(self, env: Mapping[str, str] | None) -> dict[str, str] | None:
        if not self.env and not env:
            return None
        merged = dict(os.environ)
        merged.update(self.env)
        if env:
            merged.update(env)
        return merged

    def run(
        self,
        cmd: Sequence[Argument],
        env: Mapping[str, str] | None = None,
    ) -> CommandResult:
        """Run a command and wait for it to exit.

        Args:
            cmd: Program followed by its arguments. Passed through unmodified.
            env: Per-call environment overrides (win over runner-level env).

        Returns:
            CommandResult. Never raises for spawn failures; check
            result.launch_error instead.
        """
        argv = [os.fspath(part) for part in cmd]
        logger.debug("Running command: %s (cwd=%s)", argv, self.cwd)

        start = time.monotonic()
        try:
            completed = subprocess.run(
                argv,
                cwd=self.cwd,
                env=self._merged_env(env),
                capture_output=True,
                check=False,
            )
        except (OSError, ValueError) as e:
            # ValueError: embedded null byte in argv or env
            duration = time.monotonic() - start
            logger.debug("Could not start %s: %s", argv, e)
            return CommandResult(
                command=tuple(argv),
                returncode=LAUNCH_FAILURE_EXIT_CODE,
                duration_seconds=duration,
                launch_error=str(e),
            )
        duration = time.monotonic() - start

        result = CommandResult(
            command=tuple(argv),
            returncode=completed.returncode,
            stdout=completed.stdout.decode("utf-8", errors="replace"),
            stderr=completed.stderr.decode("utf-8", errors="replace"),
            duration_seconds=duration,
        )
        if result.ok:
            logger.debug("Command exited 0 in %.2fs", duration)
        else:
            logger.debug(
                "Command exited %d in %.2fs: %s",
                result.returncode,
                duration,
                result.stderr_tail(),
            )
        return result


def run_command(
    cmd: Sequence[Argument],
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> CommandResult:
    """Run a command once with a throwaway CommandRunner."""
    return CommandRunner(cwd=cwd, env=env).run(cmd)
