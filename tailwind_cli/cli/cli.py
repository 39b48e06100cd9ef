#!/usr/bin/env python3
"""
tailwind-cli: run the Tailwind CSS executable from build scripts.

Usage:
    tailwind-cli run [OPTIONS] -- [TAILWIND_ARGS]...
    tailwind-cli which
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..core.errors import (
    TailwindCliExecutionError,
    TailwindCliLaunchError,
    UnsupportedPlatformError,
)
from ..infra.io.config import ConfigurationError, TailwindConfig
from ..infra.io.log_output.console import (
    Colors,
    configure_debug_logging,
    log,
)
from ..infra.platform import guess_platform
from ..infra.tools.command_runner import LAUNCH_FAILURE_EXIT_CODE
from ..infra.tools.env import load_user_env
from ..runner import TailwindCli

# Exit code for invalid configuration (matches click's usage error code)
CONFIG_ERROR_EXIT_CODE = 2

# A tool killed by signal N exits 128 + N, as in the shell
SIGNAL_EXIT_CODE_BASE = 128

# Bootstrap state: tracks whether bootstrap() has been called
_bootstrapped = False


def bootstrap() -> None:
    """Initialize environment.

    Loads ~/.config/tailwind-cli/.env so TAILWINDCSS_* settings there are
    visible to TailwindConfig.from_env(). Idempotent.
    """
    global _bootstrapped

    if _bootstrapped:
        return

    load_user_env()

    _bootstrapped = True


def _load_config(executable: Path | None, cwd: Path | None) -> TailwindConfig:
    """Build config from the environment, with CLI flags taking precedence.

    Raises:
        typer.Exit: If the resulting configuration is invalid.
    """
    try:
        base = TailwindConfig.from_env(validate=False)
        config = TailwindConfig(
            executable=executable if executable is not None else base.executable,
            cwd=cwd if cwd is not None else base.cwd,
        )
        errors = config.validate()
        if errors:
            raise ConfigurationError(errors)
    except ConfigurationError as e:
        log("✗", str(e), Colors.RED)
        raise typer.Exit(CONFIG_ERROR_EXIT_CODE) from e
    return config


app = typer.Typer(
    name="tailwind-cli",
    help="Run the Tailwind CSS standalone executable",
    add_completion=False,
)


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True}
)
def run(
    args: Annotated[
        list[str] | None,
        typer.Argument(
            help="Arguments passed through to tailwindcss (put them after --)",
            show_default=False,
        ),
    ] = None,
    executable: Annotated[
        Path | None,
        typer.Option(
            "--executable",
            "-e",
            help="Path to the tailwindcss executable (default: $TAILWINDCSS_BIN or PATH)",
        ),
    ] = None,
    cwd: Annotated[
        Path | None,
        typer.Option(
            "--cwd",
            help="Working directory for tailwindcss (default: $TAILWINDCSS_CWD or current)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log each step to stderr"),
    ] = False,
) -> None:
    """Run tailwindcss with ARGS and exit with its exit code."""
    bootstrap()
    if verbose:
        configure_debug_logging()

    tailwind = TailwindCli(config=_load_config(executable, cwd))
    try:
        output = tailwind.run(args or [])
    except TailwindCliLaunchError as e:
        log("✗", str(e), Colors.RED)
        raise typer.Exit(LAUNCH_FAILURE_EXIT_CODE) from e
    except TailwindCliExecutionError as e:
        typer.echo(e.stdout, nl=False)
        typer.echo(e.stderr, nl=False, err=True)
        if e.returncode < 0:
            signum = -e.returncode
            log("✗", f"tailwindcss was killed by signal {signum}", Colors.RED)
            raise typer.Exit(SIGNAL_EXIT_CODE_BASE + signum) from e
        if verbose:
            log("✗", f"tailwindcss exited with code {e.returncode}", Colors.RED)
        raise typer.Exit(e.returncode) from e

    typer.echo(output.stdout, nl=False)
    typer.echo(output.stderr, nl=False, err=True)
    if verbose:
        log("✓", f"tailwindcss finished in {output.duration_seconds:.2f}s", Colors.GREEN)


@app.command()
def which() -> None:
    """Show which tailwindcss executable would be run."""
    bootstrap()
    config = _load_config(None, None)
    tailwind = TailwindCli(config=config)

    typer.echo(f"executable: {tailwind.executable}")
    try:
        platform = str(guess_platform())
    except UnsupportedPlatformError:
        platform = "unsupported"
    typer.echo(f"platform: {platform}")
