"""Order parsing service."""
import logging
from typing import List, Optional, Sequence, Union

from voice_order.services.lexicon.languages import Language, resolve_language
from voice_order.services.menu.base import VoiceMenuMapping
from voice_order.services.menu.matcher import MatchPolicy, match_menu_items
from voice_order.services.menu.repository import CatalogRepository
from voice_order.services.ordering.intents import detect_intent
from voice_order.services.ordering.models import ParsedOrder, ParsedOrderItem
from voice_order.services.ordering.modifications import extract_modifications
from voice_order.services.ordering.normalizer import normalize_transcript
from voice_order.services.ordering.segmenter import extract_items
from voice_order.services.ordering.special_requests import extract_special_requests

logger = logging.getLogger(__name__)


def parse_order(transcript: str, language: Union[Language, str]) -> ParsedOrder:
    """
    Parse a transcript into an order draft, without menu matching.

    Args:
        transcript: Raw speech-to-text output
        language: Transcript language, as a Language or its tag

    Returns:
        ParsedOrder with unmatched items, modifications and special requests

    Raises:
        UnsupportedLanguageError: if the language is not supported
    """
    language = resolve_language(language)
    normalized = normalize_transcript(transcript, language)
    if not normalized:
        return ParsedOrder()

    order = ParsedOrder(
        items=extract_items(normalized, language),
        modifications=extract_modifications(normalized, language),
        special_requests=extract_special_requests(normalized, language),
        intent=detect_intent(normalized, language),
        normalized_text=normalized,
    )
    logger.debug(
        f"[PARSE] {language}: {len(order.items)} items, {len(order.modifications)} modifications, "
        f"{len(order.special_requests)} special requests"
    )
    return order


def parse_and_match(
    transcript: str,
    language: Union[Language, str],
    catalog: Sequence[VoiceMenuMapping],
    policy: Optional[MatchPolicy] = None,
) -> ParsedOrder:
    """Parse a transcript and resolve its items against a catalog."""
    order = parse_order(transcript, language)
    return order.model_copy(update={"items": match_menu_items(order.items, catalog, policy)})


def bind_modifications(order: ParsedOrder) -> ParsedOrder:
    """
    Bind each modification to the nearest preceding item.

    Sets ``target_index`` to the index of the last item that starts before
    the modification keyword, or None when no item precedes it. This is an
    opt-in pass; ``parse_order`` leaves modifications unbound.
    """
    positioned = [
        (item.position, index)
        for index, item in enumerate(order.items)
        if item.position is not None
    ]
    bound = []
    for modification in order.modifications:
        preceding = [
            (position, index)
            for position, index in positioned
            if modification.position is not None and position < modification.position
        ]
        target = max(preceding)[1] if preceding else None
        bound.append(modification.model_copy(update={"target_index": target}))
    return order.model_copy(update={"modifications": bound})


class VoiceOrderService:
    """Service for interpreting voice orders against tenant catalogs."""

    def __init__(
        self,
        catalog_repository: CatalogRepository,
        policy: Optional[MatchPolicy] = None,
        default_language: Union[Language, str] = Language.DE_CH,
        bind: bool = False,
    ):
        self.catalog_repository = catalog_repository
        self.policy = policy or MatchPolicy()
        self.default_language = resolve_language(default_language)
        self.bind = bind

    async def _resolve_catalog(
        self, tenant_id: str, catalog: Optional[Sequence[VoiceMenuMapping]]
    ) -> Sequence[VoiceMenuMapping]:
        if catalog is not None:
            return catalog
        return await self.catalog_repository.get_catalog(tenant_id)

    async def interpret(
        self,
        transcript: str,
        tenant_id: str,
        language: Optional[Union[Language, str]] = None,
        catalog: Optional[Sequence[VoiceMenuMapping]] = None,
        bind: Optional[bool] = None,
    ) -> ParsedOrder:
        """
        Parse a transcript and match it against a tenant catalog.

        Args:
            transcript: Raw speech-to-text output
            tenant_id: Tenant whose catalog is used when none is given
            language: Transcript language, defaults to the service default
            catalog: Explicit catalog snapshot, skips the repository
            bind: Override for binding modifications to items

        Returns:
            ParsedOrder with matched items
        """
        language = resolve_language(self.default_language if language is None else language)
        # Catalog snapshot is fetched before parsing; the parse itself is pure.
        snapshot = await self._resolve_catalog(tenant_id, catalog)
        order = parse_and_match(transcript, language, snapshot, self.policy)

        if (self.bind if bind is None else bind):
            order = bind_modifications(order)

        matched = sum(1 for item in order.items if item.matched)
        logger.info(
            f"[PARSE] Tenant '{tenant_id}' ({language}): {matched}/{len(order.items)} items matched"
        )
        return order

    async def rematch(
        self,
        items: Sequence[ParsedOrderItem],
        tenant_id: str,
        catalog: Optional[Sequence[VoiceMenuMapping]] = None,
    ) -> List[ParsedOrderItem]:
        """Match already parsed items against a (possibly updated) catalog."""
        snapshot = await self._resolve_catalog(tenant_id, catalog)
        return match_menu_items(items, snapshot, self.policy)
