from __future__ import annotations

import importlib
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from ..formatting.settings import FormatSettings


@dataclass(frozen=True)
class Settings:
    log_level: str
    log_json: bool
    format: FormatSettings


def get_settings_module() -> str:
    # APP_ENV picks the settings module, development by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return f"{__name__}.production"

    if env in {"test", "testing"}:
        return f"{__name__}.testing"

    return f"{__name__}.development"


def load_settings() -> Settings:
    load_dotenv(override=False)
    module = importlib.import_module(get_settings_module())
    return Settings(
        log_level=str(getattr(module, "LOG_LEVEL", "INFO")),
        log_json=bool(getattr(module, "LOG_JSON", False)),
        format=FormatSettings(**getattr(module, "FORMAT", {})),
    )
