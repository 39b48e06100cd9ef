"""Platform detection for Tailwind standalone executables.

The standalone releases are published as tailwindcss-<os>-<arch>; Platform
values match those suffixes.
"""

from __future__ import annotations

import platform as _platform
from enum import Enum

from tailwind_cli.core.errors import UnsupportedPlatformError

EXECUTABLE_BASENAME = "tailwindcss"


class Platform(Enum):
    """OS/architecture pairs with a published standalone build."""

    MACOS_ARM64 = "macos-arm64"
    MACOS_X64 = "macos-x64"
    LINUX_ARM64 = "linux-arm64"
    LINUX_ARMV7 = "linux-armv7"
    LINUX_X64 = "linux-x64"
    WINDOWS_ARM64 = "windows-arm64"
    WINDOWS_X64 = "windows-x64"

    def __str__(self) -> str:
        return self.value

    @property
    def is_windows(self) -> bool:
        return self.value.startswith("windows-")

    @property
    def executable_name(self) -> str:
        """Release asset name, e.g. tailwindcss-linux-x64."""
        name = f"{EXECUTABLE_BASENAME}-{self.value}"
        return f"{name}.exe" if self.is_windows else name


_SYSTEM_ALIASES = {
    "darwin": "macos",
    "macos": "macos",
    "linux": "linux",
    "windows": "windows",
}

_MACHINE_ALIASES = {
    "x86_64": "x64",
    "amd64": "x64",
    "x64": "x64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv7": "armv7",
    "armv7l": "armv7",
}


def guess_platform(system: str | None = None, machine: str | None = None) -> Platform:
    """Map an OS/architecture pair to a Platform.

    Args:
        system: OS name as reported by platform.system(). Defaults to the
            running interpreter's.
        machine: Architecture as reported by platform.machine(). Defaults to
            the running interpreter's.

    Raises:
        UnsupportedPlatformError: If no standalone build exists for the pair.
    """
    system = system if system is not None else _platform.system()
    machine = machine if machine is not None else _platform.machine()

    os_name = _SYSTEM_ALIASES.get(system.lower())
    arch = _MACHINE_ALIASES.get(machine.lower())
    if os_name is None or arch is None:
        raise UnsupportedPlatformError(system, machine)
    try:
        return Platform(f"{os_name}-{arch}")
    except ValueError:
        # e.g. macos-armv7 or windows-armv7
        raise UnsupportedPlatformError(system, machine) from None
