"""Unit tests for femtologging integration helpers."""

from __future__ import annotations

import pytest

from gh_activity.logging import (
    DEFAULT_LOG_LEVEL,
    configure_logging,
    format_log_message,
    log_debug,
    log_error,
    log_exception,
    log_info,
    log_warning,
    normalize_log_level,
)


class _RecordingLogger:
    """Collects ``log`` calls made by the helpers."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, object | None, bool]] = []

    def log(
        self,
        level: str,
        message: str,
        /,
        *,
        exc_info: object | None = None,
        stack_info: bool = False,
    ) -> str:
        self.calls.append((level, message, exc_info, stack_info))
        return message


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("warning", ("WARNING", False)),
        (" debug ", ("DEBUG", False)),
        ("TRACE", ("TRACE", False)),
        (None, ("INFO", True)),
        ("", ("INFO", True)),
        ("verbose", ("INFO", True)),
    ],
)
def test_normalize_log_level(raw: str | None, expected: tuple[str, bool]) -> None:
    """Known levels are upper-cased; anything else falls back to INFO."""
    assert normalize_log_level(raw) == expected


def test_default_level_is_valid() -> None:
    """The CLI default level needs no fallback."""
    assert normalize_log_level(DEFAULT_LOG_LEVEL) == (DEFAULT_LOG_LEVEL, False)


def test_format_log_message_uses_percent_style() -> None:
    """Templates interpolate positional arguments."""
    assert format_log_message("%s fetched %d events", "octocat", 30) == (
        "octocat fetched 30 events"
    )


@pytest.mark.parametrize(
    ("helper", "level"),
    [
        (log_debug, "DEBUG"),
        (log_info, "INFO"),
        (log_warning, "WARNING"),
        (log_error, "ERROR"),
    ],
)
def test_level_helpers_format_and_forward(helper: object, level: str) -> None:
    """Each helper pre-formats the message and emits its level."""
    logger = _RecordingLogger()

    helper(logger, "user %s", "alice")  # type: ignore[operator]

    assert logger.calls == [(level, "user alice", None, False)]


def test_log_warning_forwards_exc_info() -> None:
    """exc_info reaches the logger untouched."""
    logger = _RecordingLogger()
    exc = RuntimeError("boom")

    log_warning(logger, "retrying %s", "alice", exc_info=exc)

    assert logger.calls == [("WARNING", "retrying alice", exc, False)]


def test_log_exception_attaches_exception() -> None:
    """log_exception logs at ERROR with the exception as exc_info."""
    logger = _RecordingLogger()
    exc = ValueError("bad feed")

    log_exception(logger, "narration failed", exc)

    assert logger.calls == [("ERROR", "narration failed", exc, False)]


def test_configure_logging_passes_normalized_level(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """configure_logging hands the normalized level to basicConfig."""
    captured: dict[str, object] = {}

    def fake_basic_config(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr("gh_activity.logging.basicConfig", fake_basic_config)

    assert configure_logging("nope") == ("INFO", True)
    assert captured == {"level": "INFO", "force": False}
