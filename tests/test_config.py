"""
Testing parameter validation and launch defaults.
"""

import pytest
from pydantic import ValidationError

from mastermind.config import Configuration, SettingsError, load_settings, validate_config
from mastermind.errors import (
    ConfigError,
    InfeasibleUniqueSequence,
    InvalidColorCount,
    InvalidGuessLimit,
    InvalidHoleCount,
)


def test_valid_config_without_duplicates():
    config = validate_config(6, 4, 10, False)
    assert config.color_count == 6
    assert config.hole_count == 4
    assert config.max_guesses == 10
    assert config.allow_duplicates is False


def test_infeasible_unique_sequence():
    with pytest.raises(InfeasibleUniqueSequence):
        validate_config(3, 4, 10, False)


def test_duplicates_allowed_makes_small_palette_fine():
    config = validate_config(2, 8, 1, True)
    assert config.hole_count == 8


@pytest.mark.parametrize(
    "args, error",
    [
        ((1, 4, 10, True), InvalidColorCount),
        ((0, 4, 10, True), InvalidColorCount),
        ((6, 0, 10, True), InvalidHoleCount),
        ((6, 4, 0, True), InvalidGuessLimit),
        ((6, 4, -3, True), InvalidGuessLimit),
    ],
)
def test_invalid_values(args, error):
    with pytest.raises(error) as info:
        validate_config(*args)
    assert isinstance(info.value, ConfigError)
    assert info.value.kind == error.__name__


def test_first_failure_wins():
    # every value is bad; color count is checked first
    with pytest.raises(InvalidColorCount):
        validate_config(1, 0, 0, False)


def test_configuration_is_frozen():
    config = validate_config(6, 4, 10, True)
    with pytest.raises(ValidationError):
        config.hole_count = 5


def test_direct_construction_still_checks_feasibility():
    with pytest.raises(ValidationError):
        Configuration(color_count=3, hole_count=4, max_guesses=10, allow_duplicates=False)


# ---------------- settings ----------------

def test_settings_defaults(tmp_path):
    settings = load_settings(dotenv_path=str(tmp_path / "missing.env"))
    assert settings.colors == 6
    assert settings.holes == 4
    assert settings.guesses == 8
    assert settings.no_duplicate is False
    assert settings.log_level == "WARNING"


def test_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("MASTERMIND_COLORS", "7")
    monkeypatch.setenv("MASTERMIND_HOLES", "5")
    monkeypatch.setenv("MASTERMIND_GUESSES", "12")
    monkeypatch.setenv("MASTERMIND_NO_DUPLICATE", "yes")
    monkeypatch.setenv("MASTERMIND_LOG_LEVEL", "debug")

    settings = load_settings(dotenv_path=str(tmp_path / "missing.env"))
    assert (settings.colors, settings.holes, settings.guesses) == (7, 5, 12)
    assert settings.no_duplicate is True
    assert settings.log_level == "DEBUG"


def test_settings_from_dotenv_file(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("MASTERMIND_HOLES=3\nMASTERMIND_GUESSES=5\n", encoding="utf-8")
    # load_dotenv writes into os.environ; register the keys so monkeypatch restores them
    monkeypatch.setenv("MASTERMIND_HOLES", "")
    monkeypatch.delenv("MASTERMIND_HOLES")
    monkeypatch.setenv("MASTERMIND_GUESSES", "")
    monkeypatch.delenv("MASTERMIND_GUESSES")

    settings = load_settings(dotenv_path=str(env_file))
    assert settings.holes == 3
    assert settings.guesses == 5


@pytest.mark.parametrize(
    "name, value",
    [
        ("MASTERMIND_COLORS", "six"),
        ("MASTERMIND_HOLES", "4.5"),
        ("MASTERMIND_NO_DUPLICATE", "maybe"),
    ],
)
def test_settings_reject_garbage(monkeypatch, tmp_path, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(SettingsError):
        load_settings(dotenv_path=str(tmp_path / "missing.env"))


@pytest.mark.parametrize("value", ["verbose", "trace", "10"])
def test_settings_reject_unknown_log_level(monkeypatch, tmp_path, value):
    monkeypatch.setenv("MASTERMIND_LOG_LEVEL", value)
    with pytest.raises(SettingsError):
        load_settings(dotenv_path=str(tmp_path / "missing.env"))


def test_settings_blank_log_level_uses_default(monkeypatch, tmp_path):
    monkeypatch.setenv("MASTERMIND_LOG_LEVEL", "  ")
    settings = load_settings(dotenv_path=str(tmp_path / "missing.env"))
    assert settings.log_level == "WARNING"
