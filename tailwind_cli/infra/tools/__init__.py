"""Tools package: command execution and environment utilities."""

from tailwind_cli.infra.tools.command_runner import (
    LAUNCH_FAILURE_EXIT_CODE,
    CommandResult,
    CommandRunner,
    run_command,
)
from tailwind_cli.infra.tools.env import USER_CONFIG_DIR, load_user_env

__all__ = [
    "LAUNCH_FAILURE_EXIT_CODE",
    "USER_CONFIG_DIR",
    "CommandResult",
    "CommandRunner",
    "load_user_env",
    "run_command",
]
