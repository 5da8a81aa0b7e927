"""Tests for configuration validation and console logging helpers."""

import pytest

from gardenwalk.config import STRATEGIES, Config
from gardenwalk.logging_utils import (
    Color,
    colored,
    log_debug,
    log_deterministic,
    log_error,
    log_success,
    verbose_enabled,
)


def test_defaults_are_valid(monkeypatch):
    monkeypatch.setattr(Config, "STRATEGY", "auto")
    monkeypatch.setattr(Config, "STEP_COUNT", 26501365)
    monkeypatch.setattr(Config, "BRUTE_FORCE_LIMIT", 1000)
    Config.validate()
    assert Config.MAPS_DIR.is_dir()


@pytest.mark.parametrize(
    "attribute, value, fragment",
    [
        ("STRATEGY", "sideways", "GARDENWALK_STRATEGY"),
        ("STEP_COUNT", -1, "GARDENWALK_STEP_COUNT"),
        ("BRUTE_FORCE_LIMIT", -5, "GARDENWALK_BRUTE_FORCE_LIMIT"),
    ],
)
def test_validate_rejects_bad_values(monkeypatch, attribute, value, fragment):
    monkeypatch.setattr(Config, attribute, value)
    with pytest.raises(ValueError) as excinfo:
        Config.validate()
    assert fragment in str(excinfo.value)


def test_display_lists_current_values(monkeypatch):
    monkeypatch.setattr(Config, "STRATEGY", "brute-force")
    text = Config.display()
    assert "Strategy: brute-force" in text
    assert "Brute-Force Limit:" in text


def test_strategies_cover_cli_choices():
    assert set(STRATEGIES) == {"auto", "fast-periodic", "brute-force", "single-tile"}


def test_colored_respects_no_color(monkeypatch):
    monkeypatch.delenv("GARDENWALK_NO_COLOR", raising=False)
    assert colored("hi", Color.GREEN) == f"{Color.GREEN.value}hi{Color.RESET.value}"
    monkeypatch.setenv("GARDENWALK_NO_COLOR", "1")
    assert colored("hi", Color.GREEN, bold=True) == "hi"


def test_verbose_helpers_are_silent_unless_enabled(monkeypatch, capsys):
    monkeypatch.setenv("GARDENWALK_NO_COLOR", "1")
    monkeypatch.setenv("GARDENWALK_VERBOSE", "0")
    assert not verbose_enabled()
    log_deterministic("bfs")
    log_debug("zones")
    assert capsys.readouterr().out == ""

    monkeypatch.setenv("GARDENWALK_VERBOSE", "yes")
    log_deterministic("bfs")
    log_debug("zones")
    assert capsys.readouterr().out == "[•] bfs\n[i] zones\n"


def test_errors_go_to_stderr(monkeypatch, capsys):
    monkeypatch.setenv("GARDENWALK_NO_COLOR", "1")
    log_error("boom")
    log_success("done")
    captured = capsys.readouterr()
    assert captured.err == "[!] boom\n"
    assert captured.out == "[✓] done\n"
