"""Unit tests for environment loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from tailwind_cli.infra.tools import env

pytestmark = pytest.mark.unit


class TestGetEnvPath:
    def test_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TAILWINDCSS_TEST_PATH", raising=False)
        assert env.get_env_path("TAILWINDCSS_TEST_PATH") is None

    def test_empty_is_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TAILWINDCSS_TEST_PATH", "")
        assert env.get_env_path("TAILWINDCSS_TEST_PATH") is None

    def test_expands_user(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TAILWINDCSS_TEST_PATH", "~/bin/tailwindcss")
        assert env.get_env_path("TAILWINDCSS_TEST_PATH") == (
            Path.home() / "bin" / "tailwindcss"
        )


class TestLoadEnv:
    def test_user_env_file_loaded(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / ".env").write_text("TAILWINDCSS_BIN=/from/user/env\n")
        monkeypatch.setattr(env, "USER_CONFIG_DIR", tmp_path)
        monkeypatch.delenv("TAILWINDCSS_BIN", raising=False)

        env.load_user_env()

        assert env.get_env_path("TAILWINDCSS_BIN") == Path("/from/user/env")

    def test_user_env_does_not_override_existing(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / ".env").write_text("TAILWINDCSS_BIN=/from/user/env\n")
        monkeypatch.setattr(env, "USER_CONFIG_DIR", tmp_path)
        monkeypatch.setenv("TAILWINDCSS_BIN", "/already/set")

        env.load_user_env()

        assert env.get_env_path("TAILWINDCSS_BIN") == Path("/already/set")
