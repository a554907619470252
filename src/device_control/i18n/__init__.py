"""Translations for device status lines and GUI labels."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"


class Translator:
    """JSON translation tables, one file per language, shared process-wide.

    Once a language has been attempted it is not reloaded, even when its file
    failed to load. In that case keys are returned untranslated.
    """

    _directory: Path = Path(__file__).parent
    _translations: dict = {}
    _language: str = ""
    _initialized: bool = False

    @classmethod
    def initialize(cls, language: str) -> None:
        """Load the translation file for a language, falling back to English."""
        if cls._language == language and cls._initialized:
            return

        cls._language = language
        cls._translations = {}
        cls._initialized = True

        lang_file = cls._directory / f"{language}.json"

        try:
            with open(lang_file, "r", encoding="utf-8") as f:
                cls._translations = json.load(f)
            logger.debug(f"Loaded translations for '{language}'")
            return
        except FileNotFoundError:
            logger.warning(f"Translation file not found: {lang_file}")
        except (json.JSONDecodeError, OSError) as e:
            logger.error(f"Failed to load translations for '{language}': {e}")

        if language != DEFAULT_LANGUAGE:
            cls.initialize(DEFAULT_LANGUAGE)

    @classmethod
    def get(cls, key: str, **kwargs) -> str:
        """Translate ``key`` and format it with ``kwargs``; unknown keys come back as is."""
        if not cls._initialized:
            cls.initialize(DEFAULT_LANGUAGE)

        text = cls._translations.get(key, key)

        if kwargs:
            try:
                text = text.format(**kwargs)
            except (KeyError, ValueError, IndexError):
                logger.debug(f"Could not format translation '{key}' with {kwargs}")

        return text

    @classmethod
    def get_language(cls) -> str:
        return cls._language

    @classmethod
    def get_available_languages(cls) -> list[tuple[str, str]]:
        return [("en", "English"), ("sv", "Svenska")]


def _(key: str, **kwargs) -> str:
    return Translator.get(key, **kwargs)


def init_translator(language: str) -> None:
    Translator.initialize(language)


def get_language() -> str:
    return Translator.get_language()


def get_available_languages() -> list[tuple[str, str]]:
    return Translator.get_available_languages()
