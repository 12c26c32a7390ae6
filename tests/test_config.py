from pathlib import Path

import pytest

from gamemanager.config import load_settings


def test_defaults_without_environment():
    settings = load_settings(env={})
    assert settings.data_dir == Path("data")
    assert settings.players_path == Path("data") / "players.json"
    assert settings.log_path == Path("data") / "log.txt"
    assert settings.rating_mode == "stored"


def test_environment_values_are_used(tmp_path: Path):
    settings = load_settings(
        env={
            "GAMEMANAGER_DATA_DIR": str(tmp_path),
            "GAMEMANAGER_PLAYERS_FILE": "roster.json",
            "GAMEMANAGER_LOG_FILE": "events.log",
            "GAMEMANAGER_RATING_MODE": "Derived",
        }
    )
    assert settings.players_path == tmp_path / "roster.json"
    assert settings.log_path == tmp_path / "events.log"
    assert settings.rating_mode == "derived"


def test_invalid_rating_mode_env_falls_back(caplog):
    settings = load_settings(env={"GAMEMANAGER_RATING_MODE": "fancy"})
    assert settings.rating_mode == "stored"
    assert any("GAMEMANAGER_RATING_MODE" in record.getMessage() for record in caplog.records)


def test_overrides_win_over_environment(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("GAMEMANAGER_DATA_DIR", "/somewhere/else")
    monkeypatch.setenv("GAMEMANAGER_RATING_MODE", "stored")

    settings = load_settings(data_dir=tmp_path, rating_mode="derived")

    assert settings.data_dir == tmp_path
    assert settings.rating_mode == "derived"


def test_invalid_rating_mode_override_raises():
    with pytest.raises(ValueError):
        load_settings(rating_mode="nope", env={})
