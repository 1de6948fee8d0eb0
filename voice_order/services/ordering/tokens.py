"""Tokenization and phrase lookup helpers shared by the extractors."""
import re
from typing import Iterable, List, Optional, Pattern, Sequence, Tuple

TERMINATORS = frozenset(".!?")

_TOKEN_RE = re.compile(r"[.!?]|[^\s.!?]+")
_VOWEL_RUN_RE = re.compile(r"([äöüei])\1+")
_WHITESPACE_RE = re.compile(r"\s+")

Phrase = Tuple[str, ...]


def tokenize(text: str) -> List[str]:
    """Split text into words and standalone sentence terminators."""
    return _TOKEN_RE.findall(text)


def collapse_vowels(word: str) -> str:
    """Collapse runs of a repeated vowel (``rööschti`` -> ``röschti``)."""
    return _VOWEL_RUN_RE.sub(r"\1", word)


def tidy(text: str) -> str:
    """Collapse whitespace and drop spaces in front of terminators."""
    text = _WHITESPACE_RE.sub(" ", text).strip()
    return re.sub(r" ([.!?])", r"\1", text)


def to_phrases(phrases: Iterable[str]) -> Tuple[Phrase, ...]:
    """Split phrases into token tuples, longest first."""
    split = {tuple(phrase.split()) for phrase in phrases if phrase.strip()}
    return tuple(sorted(split, key=lambda p: (-len(p), p)))


def phrase_pattern(phrases: Iterable[str]) -> Optional[Pattern]:
    """Compile a whole-word regex matching any of the phrases."""
    alternatives = [
        r"\s+".join(re.escape(word) for word in phrase)
        for phrase in to_phrases(phrases)
    ]
    if not alternatives:
        return None
    return re.compile(r"(?<![\w'])(?:%s)(?![\w'])" % "|".join(alternatives))


def phrase_at(tokens: Sequence[str], index: int, phrases: Sequence[Phrase]) -> int:
    """
    Length of the longest phrase that starts at ``tokens[index]``.

    ``phrases`` must be ordered longest first (see ``to_phrases``).
    Returns 0 when no phrase matches.
    """
    for phrase in phrases:
        width = len(phrase)
        if tuple(tokens[index:index + width]) == phrase:
            return width
    return 0


def contains_phrase(tokens: Sequence[str], phrases: Sequence[Phrase]) -> bool:
    """Check whether any phrase occurs anywhere in the tokens."""
    return any(phrase_at(tokens, index, phrases) for index in range(len(tokens)))


def is_terminator(token: str) -> bool:
    return token in TERMINATORS
