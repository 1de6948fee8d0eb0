"""Supported transcript languages and language errors."""
from enum import Enum
from typing import Union


class VoiceOrderError(Exception):
    """Base class for voice order interpretation errors."""


class UnsupportedLanguageError(VoiceOrderError, ValueError):
    """Raised when a transcript language has no lexicon."""

    def __init__(self, language: object):
        self.language = language
        super().__init__(f"Unsupported language: {language!r}")


class Language(str, Enum):
    """Languages and dialects the interpreter has lexicons for."""

    DE_CH = "de-CH"  # Swiss German dialect
    DE = "de"
    FR = "fr"
    IT = "it"
    EN = "en"

    def __str__(self) -> str:
        """Return the string value of the language."""
        return self.value

    @property
    def locale(self) -> str:
        """Locale tag used by speech recognition and synthesis."""
        return _LOCALES[self]


_LOCALES = {
    Language.DE_CH: "de-CH",
    Language.DE: "de-DE",
    Language.FR: "fr-CH",
    Language.IT: "it-CH",
    Language.EN: "en-US",
}


def resolve_language(language: Union[Language, str]) -> Language:
    """
    Resolve a language tag to a Language.

    Accepts enum members, their values, or locale tags (case-insensitive,
    ``_`` or ``-`` separated).

    Raises:
        UnsupportedLanguageError: if the tag names no supported language
    """
    if isinstance(language, Language):
        return language
    if not isinstance(language, str):
        raise UnsupportedLanguageError(language)

    tag = language.strip().replace("_", "-").lower()
    for member in Language:
        if tag in (member.value.lower(), member.locale.lower()):
            return member
    raise UnsupportedLanguageError(language)
