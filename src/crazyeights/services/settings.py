from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from jsonschema import Draft202012Validator

from crazyeights.engine.types import Difficulty, parse_difficulty


class SettingsError(RuntimeError):
    pass


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise SettingsError(f"Missing settings file: {path}") from e
    except json.JSONDecodeError as e:
        raise SettingsError(f"Invalid JSON in {path}: {e}") from e


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: list(e.path))
    if errors:
        lines = [f"Schema validation failed for {context}:"]
        for err in errors[:10]:
            loc = "/".join(str(p) for p in err.absolute_path)
            lines.append(f"- {loc}: {err.message}")
        raise SettingsError("\n".join(lines))


@dataclass(frozen=True)
class Settings:
    difficulty: Difficulty = "medium"
    seed: int | None = None
    telemetry: bool = True

    def merged(self, overrides: Mapping[str, object]) -> "Settings":
        difficulty = overrides.get("difficulty", self.difficulty)
        seed = overrides.get("seed", self.seed)
        telemetry = overrides.get("telemetry", self.telemetry)
        return Settings(
            difficulty=parse_difficulty(str(difficulty)),
            seed=seed if isinstance(seed, int) else None,
            telemetry=bool(telemetry),
        )


class SettingsService:
    """Game defaults from data/settings.json, with an optional user override file."""

    def __init__(self, data_dir: Path, schema_dir: Path, userdata_dir: Path | None = None) -> None:
        self._data_dir = data_dir
        self._schema_dir = schema_dir
        self._userdata_dir = userdata_dir

    def _load_validated(self, path: Path) -> Mapping[str, object]:
        schema = _load_json(self._schema_dir / "settings.schema.json")
        raw = _load_json(path)
        validate_json(raw, schema, context=str(path))
        if not isinstance(raw, dict):
            raise SettingsError(f"{path.name} must be an object")
        return raw

    def load(self) -> Settings:
        settings = Settings().merged(self._load_validated(self._data_dir / "settings.json"))
        if self._userdata_dir is not None:
            user_path = self._userdata_dir / "settings.json"
            if user_path.exists():
                settings = settings.merged(self._load_validated(user_path))
        return settings

    def validate_all(self) -> None:
        # Load is validation (schema + parse)
        _ = self.load()
