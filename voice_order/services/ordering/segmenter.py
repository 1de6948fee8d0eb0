"""Quantity and item segmentation."""
import logging
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from voice_order.services.lexicon.languages import Language
from voice_order.services.lexicon.tables import Lexicon, get_lexicon
from voice_order.services.ordering.models import ParsedOrderItem
from voice_order.services.ordering.sizes import extract_size
from voice_order.services.ordering.tokens import is_terminator, phrase_at, tokenize

logger = logging.getLogger(__name__)

# Longest number phrase in any table ("es paar").
_MAX_NUMBER_WIDTH = 2


def resolve_quantity(tokens: Sequence[str], index: int, lexicon: Lexicon) -> Tuple[int, int]:
    """
    Resolve the token at ``index`` as a quantity.

    Digits are read literally; otherwise the longest matching number word
    or phrase of the lexicon is used.

    Returns:
        Tuple of (quantity, tokens consumed), ``(0, 0)`` when not a quantity
    """
    token = tokens[index]
    if token.isdecimal():
        value = int(token)
        return (value, 1) if value > 0 else (0, 0)

    for width in range(_MAX_NUMBER_WIDTH, 0, -1):
        if index + width > len(tokens):
            continue
        value = lexicon.numbers.get(" ".join(tokens[index:index + width]), 0)
        if value > 0:
            return value, width
    return 0, 0


def is_boundary(tokens: Sequence[str], index: int, lexicon: Lexicon) -> bool:
    """Check whether a phrase boundary starts at ``tokens[index]``."""
    return is_terminator(tokens[index]) or phrase_at(tokens, index, lexicon.boundary_phrases) > 0


def span_end(tokens: Sequence[str], start: int, lexicon: Lexicon) -> int:
    """Index of the first boundary token at or after ``start``."""
    end = start
    while end < len(tokens) and not is_boundary(tokens, end, lexicon):
        end += 1
    return end


def _build_item(
    span: Sequence[str], quantity: int, lexicon: Lexicon, position: Optional[int]
) -> Optional[ParsedOrderItem]:
    size, name = extract_size(" ".join(span), lexicon.language)
    if not name:
        return None
    return ParsedOrderItem(raw_name=name, quantity=quantity, size=size, position=position)


def _segment(tokens: Sequence[str], lexicon: Lexicon) -> Iterator[ParsedOrderItem]:
    index = 0
    while index < len(tokens):
        quantity, width = resolve_quantity(tokens, index, lexicon)
        if not quantity:
            index += 1
            continue

        end = span_end(tokens, index + width, lexicon)
        item = _build_item(tokens[index + width:end], quantity, lexicon, index)
        if item is not None:
            yield item
        index = max(end, index + width)


def _items_from_patterns(normalized: str, lexicon: Lexicon) -> Tuple[ParsedOrderItem, ...]:
    for pattern in lexicon.order_patterns:
        match = pattern.search(normalized)
        if not match:
            continue
        tokens = tokenize(match.group(1))
        position = len(tokenize(normalized[:match.start(1)]))
        item = _build_item(tokens[:span_end(tokens, 0, lexicon)], 1, lexicon, position)
        logger.debug(f"[SEGMENT] Template {pattern.pattern!r} matched, item: {item}")
        return (item,) if item is not None else ()
    return ()


def extract_items(normalized: str, language: Union[Language, str]) -> List[ParsedOrderItem]:
    """
    Extract (quantity, item name) pairs from a normalized transcript.

    Each quantity binds the words that follow it up to the next keyword,
    conjunction, request marker or sentence end. When no quantity is
    present, the language's ordering templates are tried and the first
    match yields a single item with quantity 1.

    Args:
        normalized: Output of ``normalize_transcript``
        language: Language of the transcript

    Returns:
        Items in order of appearance; empty when nothing was recognized
    """
    lexicon = get_lexicon(language)
    tokens = tokenize(normalized)
    items = tuple(_segment(tokens, lexicon))
    if not items and normalized:
        items = _items_from_patterns(normalized, lexicon)
    return list(items)
