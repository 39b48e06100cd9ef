"""Run the Tailwind CLI and turn its outcome into a value or an exception.

Example:
    args = ["--input", "src/main.css", "--output", "target/built.css"]
    output = tailwind_cli.run(args)
    print(output.stderr_text)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from tailwind_cli.core.errors import TailwindCliExecutionError, TailwindCliLaunchError
from tailwind_cli.core.models import TailwindCliOutput
from tailwind_cli.infra.executable import resolve_executable
from tailwind_cli.infra.io.config import TailwindConfig
from tailwind_cli.infra.tools.command_runner import Argument, CommandRunner

logger = logging.getLogger(__name__)


class TailwindCli:
    """Invokes the Tailwind executable with a fixed configuration.

    Each call to run() is an independent spawn-and-wait cycle; nothing but
    the immutable configuration is shared between calls.

    Args:
        config: Invocation settings. Defaults to TailwindConfig.from_env().
        command_runner: Runner used to spawn the process. Defaults to a
            CommandRunner bound to config.cwd and config.env.
    """

    def __init__(
        self,
        config: TailwindConfig | None = None,
        command_runner: CommandRunner | None = None,
    ) -> None:
        self.config = config if config is not None else TailwindConfig.from_env()
        self.command_runner = command_runner or CommandRunner(
            cwd=self.config.cwd, env=self.config.env
        )

    @property
    def executable(self) -> Path:
        """Path that run() would spawn right now."""
        return resolve_executable(self.config)

    def run(self, args: Iterable[Argument]) -> TailwindCliOutput:
        """Run the Tailwind CLI with args and wait for it to exit.

        Args:
            args: Command-line arguments, passed through unmodified.

        Returns:
            Captured output of the successful run.

        Raises:
            TailwindCliLaunchError: If the executable could not be started.
            TailwindCliExecutionError: If it exited with a non-zero status.
        """
        args = list(args)
        logger.info("Running Tailwind CLI with args: %s", args)

        executable = self.executable
        result = self.command_runner.run([executable, *args])

        if not result.launched:
            logger.info("Couldn't start %s: %s", executable, result.launch_error)
            raise TailwindCliLaunchError(str(executable), result.launch_error or "")

        logger.debug("Tailwind CLI stdout: %s", result.stdout)
        logger.debug("Tailwind CLI stderr: %s", result.stderr)

        if not result.ok:
            logger.info("Tailwind CLI exited with code %d", result.returncode)
            raise TailwindCliExecutionError(
                stdout=result.stdout,
                stderr=result.stderr,
                returncode=result.returncode,
                command=result.command,
            )

        logger.info("Tailwind CLI finished in %.2fs", result.duration_seconds)
        return TailwindCliOutput.from_result(result)


def run(
    args: Iterable[Argument], *, config: TailwindConfig | None = None
) -> TailwindCliOutput:
    """Run the Tailwind CLI once. See TailwindCli.run()."""
    return TailwindCli(config=config).run(args)
