#!/usr/bin/env python3
"""
tailwind-cli: run the Tailwind CSS standalone executable.

Thin shim that exposes the CLI app from tailwind_cli.cli.cli.

Usage:
    tailwind-cli run [OPTIONS] -- [TAILWIND_ARGS]...
    tailwind-cli which
"""

from .cli.cli import bootstrap

# Load ~/.config/tailwind-cli/.env before the console entrypoint runs
bootstrap()

from .cli.cli import app  # noqa: E402

if __name__ == "__main__":
    app()
