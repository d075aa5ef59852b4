# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for console logging helpers."""

from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler

from refman.logging import configure_logging, emoji, fail, get_console, ok


def test_emoji_toggle() -> None:
    assert emoji("✅ ", True) == "✅ "
    assert emoji("✅ ", False) == ""


def test_helpers_respect_emoji_flag(capsys: pytest.CaptureFixture[str]) -> None:
    ok("all good", use_emoji=False, use_color=False)
    fail("broken", use_emoji=True, use_color=False)

    out = capsys.readouterr().out
    assert "all good" in out
    assert "✅" not in out
    assert "❌ broken" in out


def test_console_is_shared_per_preferences() -> None:
    plain = get_console(color=False, emoji=False)

    assert get_console(color=False, emoji=False) is plain
    assert get_console(color=False, emoji=True) is not plain
    assert plain.no_color


def test_configure_logging_installs_single_rich_handler() -> None:
    configure_logging(debug=True, use_color=False)
    configure_logging(debug=False, use_color=False)

    package_logger = logging.getLogger("refman")
    handlers = [handler for handler in package_logger.handlers if isinstance(handler, RichHandler)]
    assert len(handlers) == 1
    assert package_logger.level == logging.WARNING


def test_colour_is_not_emitted_when_stdout_is_not_a_terminal(
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    get_console.cache_clear()

    ok("coloured", use_emoji=False, use_color=True)

    out = capsys.readouterr().out
    assert "coloured" in out
    assert "\x1b[" not in out
