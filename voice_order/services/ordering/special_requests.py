"""Special request extraction."""
from typing import List, Union

from voice_order.services.lexicon.languages import Language
from voice_order.services.lexicon.tables import get_lexicon
from voice_order.services.ordering.tokens import is_terminator, tokenize


def extract_special_requests(normalized: str, language: Union[Language, str]) -> List[str]:
    """
    Capture free-text requests introduced by politeness markers.

    The first occurrence of each marker contributes the text from the
    marker to the end of its sentence. Results are ordered by position.
    """
    lexicon = get_lexicon(language)
    tokens = tokenize(normalized)

    found = []
    for marker in lexicon.request_markers:
        width = len(marker)
        start = next(
            (i for i in range(len(tokens)) if tuple(tokens[i:i + width]) == marker),
            None,
        )
        if start is None:
            continue
        end = next(
            (i for i in range(start + width, len(tokens)) if is_terminator(tokens[i])),
            len(tokens),
        )
        found.append((start, " ".join(tokens[start:end])))

    requests: List[str] = []
    for _start, text in sorted(found):
        if text not in requests:
            requests.append(text)
    return requests
