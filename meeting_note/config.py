from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigError

SETTINGS_SECTION = "meetingNote"

# settings key -> (Settings field, environment override)
FIELDS: dict[str, tuple[str, str]] = {
    "meetingNoteTemplatePath": ("template_path", "MEETING_NOTE_TEMPLATE_PATH"),
    "meetingNoteBasePath": ("base_path", "MEETING_NOTE_BASE_PATH"),
}


@dataclass(frozen=True)
class Settings:
    """Where the note template lives and where new notes go. Both optional until used."""

    template_path: str | None = None
    base_path: str | None = None

    def require_paths(self) -> "Settings":
        if not self.template_path or not self.base_path:
            raise ConfigError("Please enter both a meetingNoteTemplatePath and meetingNoteBasePath.")
        return self


def _type_name(v: object) -> str:
    return "null" if v is None else type(v).__name__


def validate_section(section: object) -> Settings:
    """Validate the raw settings section; unknown keys are ignored."""

    if section is None:
        return Settings()
    if not isinstance(section, dict):
        raise ConfigError(f"Invalid {SETTINGS_SECTION} configuration: expected object, got {_type_name(section)}")

    errors: list[str] = []
    values: dict[str, str] = {}
    for key, (field, _env) in FIELDS.items():
        if key not in section:
            continue
        v = section[key]
        if not isinstance(v, str):
            errors.append(f"`{key}` - expected string, got {_type_name(v)}")
            continue
        values[field] = v

    if errors:
        raise ConfigError(f"Invalid {SETTINGS_SECTION} configuration: " + "; ".join(errors))
    return Settings(**values)


def load_settings(path: Path | None = None, env: Mapping[str, str] | None = None) -> Settings:
    """Load settings from a JSON file's "meetingNote" section, then apply env overrides.

    A missing file (or no path) means empty settings. Environment variables win over
    the file, so a .env (loaded by the caller) can supply everything.
    """

    env = os.environ if env is None else env

    section: object = None
    if path is not None and path.exists():
        try:
            obj = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            raise ConfigError(f"Could not read settings file {path}: {e}") from e
        if not isinstance(obj, dict):
            raise ConfigError(f"Settings file must hold a JSON object: {path}")
        section = obj.get(SETTINGS_SECTION)

    settings = validate_section(section)

    overrides: dict[str, str] = {}
    for field, env_name in FIELDS.values():
        v = str(env.get(env_name, "")).strip()
        if v:
            overrides[field] = v
    if overrides:
        settings = Settings(
            template_path=overrides.get("template_path", settings.template_path),
            base_path=overrides.get("base_path", settings.base_path),
        )
    return settings
