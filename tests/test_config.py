"""Tests for settings loading and environment overrides."""

from __future__ import annotations

import json

import pytest

from quiz_author.config import load_settings
from quiz_author.config.loader import OVERRIDES_ENV_VAR, merge_dicts


@pytest.fixture(autouse=True)
def clear_overrides(monkeypatch):
    monkeypatch.delenv(OVERRIDES_ENV_VAR, raising=False)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "quiz.yaml"
    path.write_text(
        "ingestion:\n  default_subject: សេដ្ឋកិច្ច\n  mode: text\nlogging:\n  level: debug\n",
        encoding="utf-8",
    )
    return path


def test_load_settings_from_yaml(config_file):
    settings = load_settings(config_file)

    assert settings.ingestion.default_subject == "សេដ្ឋកិច្ច"
    assert settings.ingestion.mode == "text"
    assert settings.logging.level == "DEBUG"
    assert settings.logging.use_json is False


def test_missing_explicit_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "missing.yaml")


def test_defaults_without_config_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    settings = load_settings()

    assert settings.ingestion.default_subject == ""
    assert settings.ingestion.mode == "auto"


def test_env_overrides_are_merged(config_file, monkeypatch):
    monkeypatch.setenv(OVERRIDES_ENV_VAR, json.dumps({"ingestion": {"mode": "json"}}))

    settings = load_settings(config_file)

    assert settings.ingestion.mode == "json"
    assert settings.ingestion.default_subject == "សេដ្ឋកិច្ច"


def test_bad_override_json_raises(config_file, monkeypatch):
    monkeypatch.setenv(OVERRIDES_ENV_VAR, "{not json")

    with pytest.raises(ValueError, match=OVERRIDES_ENV_VAR):
        load_settings(config_file)


def test_invalid_mode_raises(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("ingestion:\n  mode: xml\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid configuration"):
        load_settings(path)


def test_merge_dicts_is_recursive():
    merged = merge_dicts({"a": {"b": 1, "c": 2}, "d": 3}, {"a": {"b": 5}})

    assert merged == {"a": {"b": 5, "c": 2}, "d": 3}


def test_yaml_must_be_a_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- one\n- two\n", encoding="utf-8")

    with pytest.raises(ValueError, match="mapping"):
        load_settings(path)


def test_overrides_must_be_an_object(config_file, monkeypatch):
    monkeypatch.setenv(OVERRIDES_ENV_VAR, "[1, 2]")

    with pytest.raises(ValueError, match="JSON object"):
        load_settings(config_file)
