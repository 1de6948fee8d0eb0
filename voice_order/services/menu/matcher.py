"""Menu matching of extracted items against a spoken-menu catalog."""
import logging
import unicodedata
from typing import List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field
from rapidfuzz.distance import Levenshtein

from voice_order.services.menu.base import VoiceMenuMapping
from voice_order.services.ordering.models import ParsedOrderItem

logger = logging.getLogger(__name__)

EXACT_MATCH_CONFIDENCE = 1.0
ALIAS_MATCH_CONFIDENCE = 0.9
FUZZY_MATCH_THRESHOLD = 0.7


class MatchPolicy(BaseModel):
    """Confidence values and acceptance threshold for menu matching."""

    model_config = ConfigDict(frozen=True)

    exact_confidence: float = Field(default=EXACT_MATCH_CONFIDENCE, gt=0, le=1)
    alias_confidence: float = Field(default=ALIAS_MATCH_CONFIDENCE, gt=0, le=1)
    fuzzy_threshold: float = Field(default=FUZZY_MATCH_THRESHOLD, ge=0, lt=1)

    @classmethod
    def from_settings(cls, settings) -> "MatchPolicy":
        """Build the policy from application settings."""
        return cls(
            exact_confidence=settings.exact_match_confidence,
            alias_confidence=settings.alias_match_confidence,
            fuzzy_threshold=settings.fuzzy_match_threshold,
        )


def _key(text: str) -> str:
    return " ".join(unicodedata.normalize("NFC", text.lower()).split())


def similarity(a: str, b: str) -> float:
    """
    Edit-distance similarity in [0, 1].

    ``1 - levenshtein(a, b) / max(len(a), len(b))``; two empty strings are
    identical.
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - Levenshtein.distance(a, b) / longest


def _usable_entries(catalog: Sequence[VoiceMenuMapping]) -> List[Tuple[VoiceMenuMapping, str, List[str]]]:
    """Catalog entries with their primary name and spoken-name keys."""
    entries = []
    for mapping in catalog:
        names = [name for name in mapping.spoken_names if name.strip()]
        if not names:
            logger.warning(
                f"[MATCH] Skipping catalog entry '{mapping.canonical_id}' without spoken names"
            )
            continue
        entries.append((mapping, names[0], [_key(name) for name in names]))
    return entries


def _best_match(
    name: str, entries: List[Tuple[VoiceMenuMapping, str, List[str]]], policy: MatchPolicy
) -> Optional[Tuple[str, float]]:
    for _mapping, primary, keys in entries:
        if name in keys:
            return primary, policy.exact_confidence

    for mapping, primary, _keys in entries:
        if any(_key(alias) == name for alias in mapping.aliases):
            return primary, policy.alias_confidence

    best: Optional[Tuple[str, float]] = None
    for _mapping, primary, keys in entries:
        score = max(similarity(name, key) for key in keys)
        # Strict comparison keeps the earliest entry on ties.
        if best is None or score > best[1]:
            best = (primary, score)
    if best is not None and best[1] > policy.fuzzy_threshold:
        return best
    return None


def _match(
    item: ParsedOrderItem, entries: List[Tuple[VoiceMenuMapping, str, List[str]]], policy: MatchPolicy
) -> ParsedOrderItem:
    name = _key(item.raw_name)
    result = _best_match(name, entries, policy) if name else None
    if result is None:
        logger.debug(f"[MATCH] No catalog match for '{item.raw_name}'")
        return item.model_copy(update={"matched": False, "confidence": 0.0, "canonical_name": None})

    canonical_name, confidence = result
    logger.debug(f"[MATCH] '{item.raw_name}' -> '{canonical_name}' ({confidence:.2f})")
    return item.model_copy(
        update={"matched": True, "confidence": confidence, "canonical_name": canonical_name}
    )


def match_menu_item(
    item: ParsedOrderItem,
    catalog: Sequence[VoiceMenuMapping],
    policy: Optional[MatchPolicy] = None,
) -> ParsedOrderItem:
    """Resolve a single item against the catalog."""
    return _match(item, _usable_entries(catalog), policy or MatchPolicy())


def match_menu_items(
    items: Sequence[ParsedOrderItem],
    catalog: Sequence[VoiceMenuMapping],
    policy: Optional[MatchPolicy] = None,
) -> List[ParsedOrderItem]:
    """
    Resolve extracted items against a tenant catalog.

    Matching tries, in order, an exact spoken name, an alias, then the
    closest spoken name by edit distance. Earlier catalog entries win ties.
    Items are returned as new objects; unmatched items have
    ``matched=False`` and zero confidence.

    Args:
        items: Items from ``parse_order``
        catalog: Snapshot of the tenant's spoken-menu catalog
        policy: Confidence values and threshold, defaults if omitted

    Returns:
        Matched copies of the items, in the same order
    """
    policy = policy or MatchPolicy()
    entries = _usable_entries(catalog)
    return [_match(item, entries, policy) for item in items]
