"""Configuration dataclass for tailwind-cli.

Provides TailwindConfig for centralized configuration management. Programmatic
users construct it directly; the CLI loads it from environment variables via
from_env().

Environment Variables:
    TAILWINDCSS_BIN: Path to the Tailwind executable (default: search PATH)
    TAILWINDCSS_CWD: Working directory for the tool (default: caller's cwd)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from tailwind_cli.infra.tools.env import CWD_ENV_VAR, EXECUTABLE_ENV_VAR, get_env_path


class ConfigurationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        message = "Configuration validation failed:\n" + "\n".join(
            f"  - {e}" for e in errors
        )
        super().__init__(message)


@dataclass(frozen=True)
class TailwindConfig:
    """Settings shared by every invocation made through a TailwindCli.

    Attributes:
        executable: Explicit path (or command name) of the Tailwind
            executable. None searches PATH.
            Env: TAILWINDCSS_BIN
        cwd: Working directory for the spawned process. None inherits the
            caller's working directory.
            Env: TAILWINDCSS_CWD
        env: Extra environment variables for the spawned process, layered
            over the current environment.

    Example:
        config = TailwindConfig(executable=Path("bin/tailwindcss"))
        config = TailwindConfig.from_env()
    """

    executable: Path | None = None
    cwd: Path | None = None
    env: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(cls, *, validate: bool = True) -> TailwindConfig:
        """Create a TailwindConfig from environment variables.

        Args:
            validate: If True (default), run validation and raise
                ConfigurationError on any errors.

        Raises:
            ConfigurationError: If validate=True and configuration is invalid.
        """
        config = cls(
            executable=get_env_path(EXECUTABLE_ENV_VAR),
            cwd=get_env_path(CWD_ENV_VAR),
        )

        if validate:
            errors = config.validate()
            if errors:
                raise ConfigurationError(errors)

        return config

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors.

        Checks:
            - cwd, when set, is an existing directory
            - executable, when given as a path, is not a directory

        A missing executable is not a configuration error; it is reported as
        a launch failure when the tool is run.
        """
        errors: list[str] = []

        if self.cwd is not None and not self.cwd.is_dir():
            errors.append(f"cwd is not an existing directory: {self.cwd}")

        if self.executable is not None:
            text = str(self.executable)
            looks_like_path = os.sep in text or (
                os.altsep is not None and os.altsep in text
            )
            # Relative paths are resolved from cwd by the spawned process
            target = self.executable
            if self.cwd is not None and not target.is_absolute():
                target = self.cwd / target
            if looks_like_path and target.is_dir():
                errors.append(f"executable is a directory: {self.executable}")

        return errors
