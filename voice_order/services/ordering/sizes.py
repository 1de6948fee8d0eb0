"""Size extraction from item names."""
from typing import Optional, Tuple, Union

from voice_order.services.lexicon.languages import Language
from voice_order.services.lexicon.tables import get_lexicon
from voice_order.services.ordering.models import Size
from voice_order.services.ordering.tokens import tidy


def extract_size(item_name: str, language: Union[Language, str]) -> Tuple[Optional[Size], str]:
    """
    Detect a size adjective in an item name and strip it.

    Sizes are checked small, medium, large; the first term found wins and
    only that term is removed from the name.

    Returns:
        Tuple of (size or None, remaining item name)
    """
    lexicon = get_lexicon(language)
    for size, _term, pattern in lexicon.size_patterns:
        if pattern.search(item_name):
            return size, tidy(pattern.sub(" ", item_name))
    return None, tidy(item_name)
