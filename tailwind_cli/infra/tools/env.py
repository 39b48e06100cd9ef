"""Environment configuration and loading for tailwind-cli.

Centralizes the user config path and dotenv loading. The CLI calls
load_user_env() before building a TailwindConfig so values from the user's
.env file are visible to TailwindConfig.from_env().
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# User config directory (stores .env)
USER_CONFIG_DIR = Path.home() / ".config" / "tailwind-cli"

# Environment variables read by TailwindConfig.from_env()
EXECUTABLE_ENV_VAR = "TAILWINDCSS_BIN"
CWD_ENV_VAR = "TAILWINDCSS_CWD"


def get_env_path(name: str) -> Path | None:
    """Read a path from the environment, treating empty strings as unset.

    Evaluated at call time, so it respects values loaded via load_user_env().
    """
    value = os.environ.get(name)
    if not value:
        return None
    return Path(value).expanduser()


def load_user_env() -> None:
    """Load environment from ${USER_CONFIG_DIR}/.env.

    Existing environment variables are not overridden.
    """
    load_dotenv(dotenv_path=USER_CONFIG_DIR / ".env")

