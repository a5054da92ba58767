"""Translation catalogs."""

from __future__ import annotations

import logging
import os
from typing import Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_TRANSLATIONS_DIR = os.path.join(os.path.dirname(__file__), "translations")
DEFAULT_CATALOG = "messages.yml"


def load_messages(path: str) -> Dict[str, str]:
    with open(path, "r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Translation catalog must be a mapping: {path}")
    return {str(key): str(value) for key, value in data.items()}


class Translator:
    def __init__(self, messages: Dict[str, str], locale: str = "en") -> None:
        self.messages = dict(messages)
        self.locale = locale

    def get(self, key: str, *args: object) -> str:
        template = self.messages.get(key)
        if template is None:
            logger.warning("Missing translation for %s (%s)", key, self.locale)
            return f"!{key}!"
        return template.format(*args) if args else template

    __call__ = get


def load_translator(locale: str = "en", translations_dir: Optional[str] = None) -> Translator:
    """Load the default catalog and layer the locale catalog on top of it."""
    base_dir = translations_dir or DEFAULT_TRANSLATIONS_DIR
    messages = load_messages(os.path.join(base_dir, DEFAULT_CATALOG))
    language = (locale or "").split("_")[0].split("-")[0].lower()
    if language:
        locale_path = os.path.join(base_dir, f"messages_{language}.yml")
        if os.path.exists(locale_path):
            messages.update(load_messages(locale_path))
        else:
            logger.debug("No catalog for locale %s, using defaults", locale)
    return Translator(messages, locale=locale)
