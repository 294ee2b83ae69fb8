"""Tests for Settings and load_settings (.env and environment)."""

import pytest

from egphone.config import DEFAULT_REGION_ENV, Settings, load_settings
from egphone.validation import build_validator


def test_default_settings_have_no_region():
    assert Settings().default_region is None


def test_region_is_normalized():
    assert Settings(default_region=" eg ").default_region == "EG"
    assert Settings(default_region="  ").default_region is None


def test_unknown_region_raises():
    with pytest.raises(ValueError, match="Unknown default region"):
        Settings(default_region="XX")


def test_load_settings_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv(DEFAULT_REGION_ENV, "eg")
    settings = load_settings(tmp_path / "missing.env")
    assert settings.default_region == "EG"


def test_load_settings_empty_variable_means_none(monkeypatch, tmp_path):
    monkeypatch.setenv(DEFAULT_REGION_ENV, "")
    assert load_settings(tmp_path / "missing.env").default_region is None


def test_load_settings_reads_env_file(monkeypatch, tmp_path):
    # set then delete so monkeypatch removes the value load_dotenv writes
    monkeypatch.setenv(DEFAULT_REGION_ENV, "US")
    monkeypatch.delenv(DEFAULT_REGION_ENV)
    env_file = tmp_path / ".env"
    env_file.write_text(f"{DEFAULT_REGION_ENV}=EG\n")
    assert load_settings(env_file).default_region == "EG"


def test_environment_wins_over_env_file(monkeypatch, tmp_path):
    monkeypatch.setenv(DEFAULT_REGION_ENV, "US")
    env_file = tmp_path / ".env"
    env_file.write_text(f"{DEFAULT_REGION_ENV}=EG\n")
    assert load_settings(env_file).default_region == "US"


def test_loaded_settings_configure_an_explicit_validator(monkeypatch, tmp_path):
    monkeypatch.setenv(DEFAULT_REGION_ENV, "EG")
    validator = build_validator(load_settings(tmp_path / "missing.env"))
    assert validator.is_valid("02 1234 5678") is True
