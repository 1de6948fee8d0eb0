"""Utterance intent detection."""
from typing import Union

from voice_order.services.lexicon.languages import Language
from voice_order.services.lexicon.tables import get_lexicon
from voice_order.services.ordering.models import Intent
from voice_order.services.ordering.segmenter import resolve_quantity
from voice_order.services.ordering.tokens import contains_phrase, tokenize


def detect_intent(normalized: str, language: Union[Language, str]) -> Intent:
    """
    Classify a normalized utterance.

    Checks run in a fixed order: greeting, order, deny, confirm, quantity,
    complete. Negations are checked before confirmations so that
    ``sicher nöd`` is not read as ``sicher``.
    """
    lexicon = get_lexicon(language)
    tokens = tokenize(normalized)
    if not tokens:
        return Intent.UNKNOWN

    checks = (
        (Intent.GREETING, lexicon.greetings),
        (Intent.ORDER, lexicon.order_phrases),
        (Intent.DENY, lexicon.no_words),
        (Intent.CONFIRM, lexicon.yes_words),
    )
    for intent, phrases in checks:
        if contains_phrase(tokens, phrases):
            return intent

    if any(resolve_quantity(tokens, index, lexicon)[0] for index in range(len(tokens))):
        return Intent.QUANTITY
    if contains_phrase(tokens, lexicon.completion_phrases):
        return Intent.COMPLETE
    return Intent.UNKNOWN
