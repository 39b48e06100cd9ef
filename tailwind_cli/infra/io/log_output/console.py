"""Console logging helpers for tailwind-cli.

Colored status lines for the CLI, plus opt-in debug logging of the
tailwind_cli logger namespace to stderr.
"""

import logging
import sys
from datetime import datetime
from typing import TextIO

# Name tag for the handler installed by configure_debug_logging()
_DEBUG_HANDLER_NAME = "tailwind_cli_debug"


class Colors:
    """ANSI color codes for terminal output (bright variants)."""

    RESET = "\033[0m"
    GREEN = "\033[92m"
    CYAN = "\033[96m"
    RED = "\033[91m"
    GRAY = "\033[90m"
    # Subdued style for secondary info
    MUTED = "\033[90m"


def log(
    icon: str,
    message: str,
    color: str = Colors.RESET,
    dim: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Print a timestamped status line.

    Status lines go to stderr by default so they never mix with the
    wrapped tool's stdout.
    """
    style = Colors.MUTED if dim else ""
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(
        f"{Colors.GRAY}{timestamp}{Colors.RESET} {style}{color}{icon} {message}{Colors.RESET}",
        file=stream if stream is not None else sys.stderr,
    )


def configure_debug_logging(stream: TextIO | None = None) -> logging.Handler:
    """Send DEBUG records from the tailwind_cli namespace to stream.

    Replaces any handler installed by a previous call so repeated CLI
    invocations in one process don't duplicate output.

    Returns:
        The installed handler.
    """
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    handler.set_name(_DEBUG_HANDLER_NAME)

    package_logger = logging.getLogger("tailwind_cli")
    package_logger.setLevel(logging.DEBUG)

    for existing in package_logger.handlers[:]:
        if existing.get_name() == _DEBUG_HANDLER_NAME:
            existing.close()
            package_logger.removeHandler(existing)

    package_logger.addHandler(handler)
    return handler
