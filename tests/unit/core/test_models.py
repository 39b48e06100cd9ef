"""Unit tests for TailwindCliOutput."""

from __future__ import annotations

import pytest

from tailwind_cli.core.models import TailwindCliOutput
from tailwind_cli.infra.tools.command_runner import CommandResult

pytestmark = pytest.mark.unit


class TestTailwindCliOutput:
    def test_from_result(self) -> None:
        result = CommandResult(
            command=("tailwindcss", "--help"),
            returncode=0,
            stdout="\ntailwindcss v3.4.1\n",
            stderr="Done in 12ms.\n",
            duration_seconds=0.25,
        )
        output = TailwindCliOutput.from_result(result)

        assert output.stdout == "\ntailwindcss v3.4.1\n"
        assert output.stderr == "Done in 12ms.\n"
        assert output.returncode == 0
        assert output.command == ("tailwindcss", "--help")
        assert output.duration_seconds == 0.25

    def test_text_properties_are_trimmed(self) -> None:
        output = TailwindCliOutput(stdout="  built \n", stderr="\nDone.\n\n")
        assert output.stdout_text == "built"
        assert output.stderr_text == "Done."

    def test_is_immutable(self) -> None:
        output = TailwindCliOutput(stdout="", stderr="")
        with pytest.raises(AttributeError):
            output.stdout = "changed"  # type: ignore[misc]

    def test_is_hashable(self) -> None:
        output = TailwindCliOutput(stdout="", stderr="", command=("tailwindcss",))
        same = TailwindCliOutput(stdout="", stderr="", command=("tailwindcss",))
        assert hash(output) == hash(same)
