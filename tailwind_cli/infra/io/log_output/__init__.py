"""Console output helpers for the CLI."""
