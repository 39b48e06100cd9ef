"""Locate the Tailwind executable to spawn."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from tailwind_cli.core.errors import UnsupportedPlatformError
from tailwind_cli.infra.io.config import TailwindConfig
from tailwind_cli.infra.platform import EXECUTABLE_BASENAME, guess_platform

logger = logging.getLogger(__name__)


def resolve_executable(config: TailwindConfig) -> Path:
    """Return the path of the Tailwind executable for config.

    Lookup order:
        1. config.executable, used as given
        2. "tailwindcss" on PATH
        3. the platform-specific release name (tailwindcss-linux-x64, ...) on PATH
        4. the bare name "tailwindcss"

    Never raises for a missing executable: the bare-name fallback fails at
    spawn time and is reported as a launch failure.
    """
    if config.executable is not None:
        logger.debug("Using configured executable: %s", config.executable)
        return config.executable

    found = shutil.which(EXECUTABLE_BASENAME)
    if found:
        logger.debug("Found %s on PATH: %s", EXECUTABLE_BASENAME, found)
        return Path(found)

    try:
        platform = guess_platform()
    except UnsupportedPlatformError as e:
        logger.debug("Skipping platform-specific lookup: %s", e)
    else:
        found = shutil.which(platform.executable_name)
        if found:
            logger.debug("Found %s on PATH: %s", platform.executable_name, found)
            return Path(found)

    logger.debug("No Tailwind executable found on PATH")
    return Path(EXECUTABLE_BASENAME)
