"""tailwind-cli: run the Tailwind CSS standalone executable from Python."""

from .core.errors import (
    TailwindCliError,
    TailwindCliExecutionError,
    TailwindCliLaunchError,
    UnsupportedPlatformError,
)
from .core.models import TailwindCliOutput
from .infra.io.config import ConfigurationError, TailwindConfig
from .runner import TailwindCli, run

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "TailwindCli",
    "TailwindCliError",
    "TailwindCliExecutionError",
    "TailwindCliLaunchError",
    "TailwindCliOutput",
    "TailwindConfig",
    "UnsupportedPlatformError",
    "__version__",
    "run",
]
