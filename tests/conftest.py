"""Pytest configuration for tailwind-cli tests."""

import os

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Configure test environment before collection.

    Removes TAILWINDCSS_* variables so a developer's own settings never
    leak into TailwindConfig.from_env() during tests.
    """
    for name in ("TAILWINDCSS_BIN", "TAILWINDCSS_CWD"):
        os.environ.pop(name, None)


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Default unmarked tests to unit category."""
    for item in items:
        if any(marker in item.keywords for marker in ("unit", "integration")):
            continue
        item.add_marker(pytest.mark.unit)
