"""Modification extraction."""
from typing import Iterator, List, Sequence, Tuple, Union

from voice_order.services.lexicon.languages import Language
from voice_order.services.lexicon.tables import Lexicon, get_lexicon
from voice_order.services.ordering.models import ModificationType, OrderModification
from voice_order.services.ordering.segmenter import span_end
from voice_order.services.ordering.tokens import Phrase, phrase_at, tokenize


def _scan(
    tokens: Sequence[str],
    mod_type: ModificationType,
    keywords: Tuple[Phrase, ...],
    lexicon: Lexicon,
) -> Iterator[OrderModification]:
    for index in range(len(tokens)):
        width = phrase_at(tokens, index, keywords)
        if not width:
            continue
        end = span_end(tokens, index + width, lexicon)
        phrase = " ".join(tokens[index + width:end])
        if phrase:
            yield OrderModification(type=mod_type, modifier_phrase=phrase, position=index)


def extract_modifications(normalized: str, language: Union[Language, str]) -> List[OrderModification]:
    """
    Find add/remove/change instructions in a normalized transcript.

    Each keyword captures the words after it up to the next conjunction,
    modification keyword, request marker or sentence end. Modifications
    are grouped by type (add, remove, change) and ordered by position
    within a type. They are not bound to items; ``target_item`` stays
    ``"current"``.
    """
    lexicon = get_lexicon(language)
    tokens = tokenize(normalized)
    return [
        modification
        for mod_type, keywords in lexicon.modification_phrases
        for modification in _scan(tokens, mod_type, keywords, lexicon)
    ]
