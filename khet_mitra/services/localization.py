"""
Server-side translations.

Strings live in one JSON file per language under ``khet_mitra/locales``,
grouped by page namespace (``sidebar``, ``dashboard``, ``chat`` ...).
Languages without a file fall back to English.
"""

import json
import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import Any

from khet_mitra.models.language import Language

logger = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).resolve().parent.parent / "locales"
DEFAULT_LANGUAGE = Language.ENGLISH


@lru_cache()
def load_translations(language: str) -> dict:
    path = LOCALES_DIR / f"{language}.json"
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def get_namespace(language: str, namespace: str) -> dict:
    translations = load_translations(Language(language).value)
    ns = translations.get(namespace)
    if ns is None:
        ns = load_translations(DEFAULT_LANGUAGE.value).get(namespace, {})
    return ns


def get_nested_value(obj: Any, path: str) -> Any:
    for part in path.split("."):
        if not isinstance(obj, dict) or part not in obj:
            return None
        obj = obj[part]
    return obj


def translate(language: str, namespace: str, key: str, **options: Any) -> str:
    translation = get_nested_value(get_namespace(language, namespace), key)
    if not isinstance(translation, str):
        fallback = load_translations(DEFAULT_LANGUAGE.value).get(namespace, {})
        translation = get_nested_value(fallback, key)
    if not isinstance(translation, str):
        logger.debug("Missing translation %s.%s for %s", namespace, key, language)
        translation = f"{namespace}.{key}"

    for name, value in options.items():
        translation = re.sub(
            r"\{\{" + re.escape(name) + r"\}\}",
            lambda _: str(value),
            translation,
        )
    return translation


class Translator:
    """Binds a language and namespace, like the ``t`` function on a page."""

    def __init__(self, language: str, namespace: str) -> None:
        self.language = language
        self.namespace = namespace

    def __call__(self, key: str, **options: Any) -> str:
        return translate(self.language, self.namespace, key, **options)
