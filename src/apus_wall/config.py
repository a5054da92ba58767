"""Configuration handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import yaml

from .models import FLAGS_PATH


@dataclass
class Config:
    timezone: str = "Europe/Zurich"
    locale: str = "en"
    translations_dir: Optional[str] = None
    flags_path: str = FLAGS_PATH
    log_dir: str = "logs"
    log_file: str = "apus_wall.log"
    log_level: str = "INFO"


def load_config(path: str) -> Config:
    with open(path, "r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}

    defaults = Config()
    return Config(
        timezone=data.get("timezone", defaults.timezone),
        locale=data.get("locale", defaults.locale),
        translations_dir=data.get("translations_dir"),
        flags_path=data.get("flags_path", defaults.flags_path),
        log_dir=data.get("log_dir", defaults.log_dir),
        log_file=data.get("log_file", defaults.log_file),
        log_level=str(data.get("log_level", defaults.log_level)).upper(),
    )


def save_config(path: str, config: Config) -> None:
    data = {
        "timezone": config.timezone,
        "locale": config.locale,
        "translations_dir": config.translations_dir,
        "flags_path": config.flags_path,
        "log_dir": config.log_dir,
        "log_file": config.log_file,
        "log_level": config.log_level,
    }
    with open(path, "w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, sort_keys=False)
