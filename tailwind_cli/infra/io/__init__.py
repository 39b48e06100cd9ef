"""I/O utilities for tailwind-cli.

This package contains:
- config: TailwindConfig dataclass for configuration management
- log_output/: Console output and debug logging
"""

from tailwind_cli.infra.io.config import ConfigurationError, TailwindConfig

__all__ = ["ConfigurationError", "TailwindConfig"]
