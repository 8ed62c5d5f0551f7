"""Unit tests for the gh-activity command-line entry point."""

from __future__ import annotations

import builtins

import pytest

from gh_activity import cli
from gh_activity.shell import CLOSING_MESSAGE


@pytest.fixture
def logging_calls(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Replace femtologging configuration with a recorder."""
    calls: list[str] = []

    def _fake_configure(level: str, *, force: bool = False) -> tuple[str, bool]:
        del force
        calls.append(level)
        return ("INFO", level.upper() != "INFO")

    monkeypatch.setattr(cli, "configure_logging", _fake_configure)
    monkeypatch.delenv("GH_ACTIVITY_TIMEOUT_S", raising=False)
    monkeypatch.delenv("GH_ACTIVITY_LOG_LEVEL", raising=False)
    return calls


def test_main_quits_with_success(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    logging_calls: list[str],
) -> None:
    """Typing quit at the first prompt exits 0 without network access."""
    monkeypatch.setattr(builtins, "input", lambda prompt: "quit")

    assert cli.main([]) == 0
    assert capsys.readouterr().out == f"{CLOSING_MESSAGE}\n"
    assert logging_calls == ["WARNING"]


def test_main_log_level_flag_overrides_env(
    monkeypatch: pytest.MonkeyPatch, logging_calls: list[str]
) -> None:
    """--log-level wins over GH_ACTIVITY_LOG_LEVEL."""
    monkeypatch.setenv("GH_ACTIVITY_LOG_LEVEL", "ERROR")
    monkeypatch.setattr(builtins, "input", lambda prompt: "q")

    cli.main(["--log-level", "debug"])

    assert logging_calls == ["debug"]


def test_main_reads_log_level_from_env(
    monkeypatch: pytest.MonkeyPatch, logging_calls: list[str]
) -> None:
    """The environment supplies the level when no flag is given."""
    monkeypatch.setenv("GH_ACTIVITY_LOG_LEVEL", "ERROR")
    monkeypatch.setattr(builtins, "input", lambda prompt: "q")

    cli.main([])

    assert logging_calls == ["ERROR"]


def test_main_rejects_invalid_configuration(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    logging_calls: list[str],
) -> None:
    """Invalid environment configuration ends the process with status 1."""
    monkeypatch.setenv("GH_ACTIVITY_TIMEOUT_S", "never")

    def _unexpected_input(prompt: str) -> str:
        pytest.fail("the prompt must not be shown")

    monkeypatch.setattr(builtins, "input", _unexpected_input)

    assert cli.main([]) == 1
    assert "GH_ACTIVITY_TIMEOUT_S" in capsys.readouterr().err
    assert logging_calls
