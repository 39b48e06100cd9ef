"""In-memory fake implementations for testing.

Fakes are preferred over mocks: they implement the real interface and let
tests assert on outputs and recorded state.

Available fakes:
- FakeCommandRunner: Deterministic command execution with fail-closed semantics

Usage:
    from tests.fakes import FakeCommandRunner

    def test_something():
        runner = FakeCommandRunner()
        runner.respond(returncode=0, stdout="done")
"""

from tests.fakes.command_runner import FakeCommandRunner

__all__ = ["FakeCommandRunner"]
