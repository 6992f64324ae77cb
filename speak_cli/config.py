import os
import json
from pathlib import Path
from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

APP_NAME = "speak-cli"

# XDG Paths - Explicit XDG resolution so ~/.config/ is used even on macOS
CONFIG_DIR = Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config")) / APP_NAME
SETTINGS_FILE = CONFIG_DIR / "settings.json"
PROJECT_CONFIG_DIR = ".speak-cli"


class Settings(BaseModel):
    # Generation defaults
    mood: Optional[str] = Field(default=None)
    stupidity: int = Field(default=0, ge=0, le=100)
    seed: Optional[int] = Field(default=None)
    count: int = Field(default=1, ge=1, le=100)

    # Custom libraries/moods/templates (YAML)
    data_file: Optional[str] = Field(default=None)

    # Display
    theme: Literal["light", "dark"] = Field(default="light")

    @field_validator("mood", "data_file", mode="before")
    @classmethod
    def _blank_is_none(cls, v: Optional[str]) -> Optional[str]:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode='before')
    @classmethod
    def fill_from_env(cls, data: dict) -> dict:
        """Env vars override all file-based values (highest precedence layer)."""
        env_map = {
            "mood": "SPEAK_MOOD",
            "stupidity": "SPEAK_STUPIDITY",
            "seed": "SPEAK_SEED",
            "count": "SPEAK_COUNT",
            "data_file": "SPEAK_DATA_FILE",
            "theme": "SPEAK_THEME",
        }

        for field, env_var in env_map.items():
            val = os.getenv(env_var)
            if val:
                data[field] = val
        return data


def find_project_config() -> Path | None:
    """Return .speak-cli/settings.json in cwd if it exists, else None."""
    candidate = Path.cwd() / PROJECT_CONFIG_DIR / "settings.json"
    return candidate if candidate.is_file() else None


def load_config() -> Settings:
    data: dict = {}

    # Layer 1: User config (~/.config/speak-cli/settings.json)
    if SETTINGS_FILE.exists():
        with open(SETTINGS_FILE, "r") as f:
            try:
                data = json.load(f)
            except Exception as e:
                print(f"Error loading settings.json: {e}. Using defaults.")

    # Layer 2: Project config (<cwd>/.speak-cli/settings.json), shallow merge
    project_config = find_project_config()
    if project_config is not None:
        with open(project_config, "r") as f:
            try:
                data |= json.load(f)
            except Exception as e:
                print(f"Error loading project config {project_config}: {e}. Skipping.")

    # Layer 3: Env vars (handled by fill_from_env model_validator)
    return Settings.model_validate(data)


# Lazy settings singleton, read on first access rather than at import time.
_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the global Settings instance, creating it on first call."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def __getattr__(name: str):
    """Lazy module attribute: ``from speak_cli.config import settings`` works without import-time side effects."""
    if name == "settings":
        return get_settings()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
