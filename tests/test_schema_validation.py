from __future__ import annotations

import json
from pathlib import Path

import pytest

from crazyeights.paths import get_paths
from crazyeights.services.settings import SettingsError, SettingsService


def test_settings_schema_validates() -> None:
    paths = get_paths()
    settings = SettingsService(paths.data_dir, paths.schema_dir)
    settings.validate_all()
    assert settings.load().difficulty == "medium"


def test_user_override_is_merged(tmp_path: Path) -> None:
    paths = get_paths()
    (tmp_path / "settings.json").write_text(
        json.dumps({"difficulty": "very easy", "seed": 11}), encoding="utf-8"
    )
    settings = SettingsService(paths.data_dir, paths.schema_dir, tmp_path).load()
    assert settings.difficulty == "very easy"
    assert settings.seed == 11
    assert settings.telemetry is True


def test_hard_difficulty_fails_validation(tmp_path: Path) -> None:
    paths = get_paths()
    (tmp_path / "settings.json").write_text(json.dumps({"difficulty": "hard"}), encoding="utf-8")
    with pytest.raises(SettingsError) as exc:
        SettingsService(paths.data_dir, paths.schema_dir, tmp_path).load()
    assert "difficulty" in str(exc.value)


def test_broken_json_is_reported(tmp_path: Path) -> None:
    paths = get_paths()
    (tmp_path / "settings.json").write_text("{nope", encoding="utf-8")
    with pytest.raises(SettingsError):
        SettingsService(paths.data_dir, paths.schema_dir, tmp_path).load()
