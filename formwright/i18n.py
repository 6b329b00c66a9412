"""
Translation lookup and caching for formwright.

Inputs consume translations through the small ``Translator`` contract
(key, locale, default -> string). A missing key never raises; the default
is returned instead.

``TranslationCache`` is the only state shared between render calls. It is
owned by the caller and injected into the builder; ``invalidate`` is the
explicit reset between tests or locale reloads. It performs no locking, so
resets must happen outside concurrent render windows.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union
import logging

from .config_loader import deep_merge
from .exceptions import ConfigurationLoadError

logger = logging.getLogger(__name__)

_MISSING = object()


class Translator:
    """Translation lookup contract."""

    def translate(self, key: str, locale: str, default: Optional[str] = None) -> Optional[str]:
        raise NotImplementedError


class NullTranslator(Translator):
    """Translator that always answers with the default."""

    def translate(self, key: str, locale: str, default: Optional[str] = None) -> Optional[str]:
        return default


class DictTranslator(Translator):
    """
    Translator backed by nested dictionaries, one per locale.

    Keys are dotted paths (``formwright.labels.user.name``).
    """

    def __init__(self, translations: Optional[Dict[str, Dict[str, Any]]] = None):
        self._store: Dict[str, Dict[str, Any]] = {}
        for locale, data in (translations or {}).items():
            self.store_translations(locale, data)

    def store_translations(self, locale: str, data: Dict[str, Any]) -> None:
        """Merge translations into a locale."""
        self._store[locale] = deep_merge(self._store.get(locale, {}), data)
        logger.debug(f"Stored translations for locale '{locale}'")

    def translate(self, key: str, locale: str, default: Optional[str] = None) -> Optional[str]:
        node: Any = self._store.get(locale, _MISSING)
        for part in key.split('.'):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        if node is None or isinstance(node, dict):
            return default
        return str(node)

    @property
    def locales(self):
        return sorted(self._store)

    @classmethod
    def from_yaml(cls, *paths: Union[str, Path]) -> 'DictTranslator':
        """
        Build a translator from YAML locale files.

        Each file holds a single top-level key naming its locale, with the
        translations nested beneath it.

        Args:
            *paths: Locale file paths

        Returns:
            Populated translator

        Raises:
            ConfigurationLoadError: If a file cannot be read or parsed
        """
        translator = cls()
        for path in paths:
            path = Path(path)
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    data = yaml.safe_load(f) or {}
            except (yaml.YAMLError, IOError, OSError) as e:
                logger.error(f"Failed to load locale file {path}: {e}")
                raise ConfigurationLoadError(path, e)

            if not isinstance(data, dict):
                error = ValueError("locale file must contain a mapping")
                logger.error(f"Invalid locale file {path}: {error}")
                raise ConfigurationLoadError(path, error)

            for locale, translations in data.items():
                if isinstance(translations, dict):
                    translator.store_translations(str(locale), translations)
            logger.info(f"Loaded locale file {path}")
        return translator


def lookup_chain(translator: Translator, keys: Iterable[str], locale: str,
                 default: Optional[str] = None) -> Optional[str]:
    """
    Translate the first key that has a value.

    Args:
        translator: Translator to query
        keys: Candidate keys, most specific first
        locale: Locale name
        default: Value returned when no key is found

    Returns:
        Translated string or default
    """
    for key in keys:
        value = translator.translate(key, locale, None)
        if value is not None:
            return value
    return default


class TranslationCache:
    """
    Process-wide translation cache, keyed by cache key and locale.

    Values are computed by the caller on first use and kept until the key
    is invalidated. Entries never expire on their own.
    """

    def __init__(self):
        self._entries: Dict[str, Dict[str, Any]] = {}

    def get(self, key: str, locale: str, default: Any = None) -> Any:
        return self._entries.get(key, {}).get(locale, default)

    def put(self, key: str, locale: str, value: Any) -> Any:
        self._entries.setdefault(key, {})[locale] = value
        return value

    def fetch(self, key: str, locale: str, compute) -> Any:
        """Return the cached value, computing and storing it on a miss."""
        entries = self._entries.setdefault(key, {})
        if locale not in entries:
            entries[locale] = compute()
        return entries[locale]

    def invalidate(self, key: str) -> None:
        """Drop every locale cached under a key."""
        if self._entries.pop(key, None) is not None:
            logger.debug(f"Invalidated translation cache key '{key}'")

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._entries
