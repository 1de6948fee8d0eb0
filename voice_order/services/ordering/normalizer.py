"""Transcript normalization."""
import logging
import re
import unicodedata
from typing import Union

from voice_order.services.lexicon.languages import Language
from voice_order.services.lexicon.tables import Lexicon, get_lexicon
from voice_order.services.ordering.tokens import collapse_vowels, tidy

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"[^\W\d_]+")
# Sentence terminators, apostrophes and hyphens survive; the rest is noise.
_PUNCTUATION_RE = re.compile(r"[,;:\"“”„‟«»‹›()\[\]{}…/\\*]")


def _dialect_word(word: str, lexicon: Lexicon) -> str:
    if word in lexicon.canonical_terms:
        return word
    collapsed = collapse_vowels(word)
    return lexicon.synonyms.get(collapsed, collapsed)


def _remove_fillers(text: str, lexicon: Lexicon) -> str:
    if lexicon.filler_pattern is None:
        return text
    # Removing one filler can make a multi-word filler adjacent.
    while True:
        stripped = tidy(lexicon.filler_pattern.sub(" ", text))
        if stripped == text:
            return text
        text = stripped


def normalize_transcript(transcript: str, language: Union[Language, str]) -> str:
    """
    Normalize a raw transcript for extraction.

    Lowercases, strips non-terminal punctuation, collapses dialect vowel
    runs, replaces dialect food terms with canonical ones and removes
    filler words. Normalizing twice gives the same result as once.

    Args:
        transcript: Raw speech-to-text output
        language: Language of the transcript

    Returns:
        Normalized transcript, empty for blank input
    """
    lexicon = get_lexicon(language)
    if not transcript or not transcript.strip():
        return ""

    text = unicodedata.normalize("NFC", transcript.lower())
    text = text.replace("’", "'").replace("`", "'")
    text = tidy(_PUNCTUATION_RE.sub(" ", text))

    if lexicon.collapses_vowels:
        text = _WORD_RE.sub(lambda match: _dialect_word(match.group(0), lexicon), text)

    text = _remove_fillers(text, lexicon)
    logger.debug(f"[NORMALIZE] {lexicon.language}: {transcript!r} -> {text!r}")
    return text
