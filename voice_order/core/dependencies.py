"""FastAPI dependencies."""
from functools import lru_cache

from fastapi import Depends

from voice_order.core.config import settings
from voice_order.services.menu.in_memory_menu import InMemoryCatalogProvider
from voice_order.services.menu.matcher import MatchPolicy
from voice_order.services.menu.repository import CatalogRepository
from voice_order.services.ordering.parser import VoiceOrderService


@lru_cache
def get_catalog_repository() -> CatalogRepository:
    """Get catalog repository instance."""
    return CatalogRepository(provider=InMemoryCatalogProvider(settings.catalog_file))


def get_voice_order_service(
    catalog_repository: CatalogRepository = Depends(get_catalog_repository),
) -> VoiceOrderService:
    """Get voice order service instance."""
    return VoiceOrderService(
        catalog_repository=catalog_repository,
        policy=MatchPolicy.from_settings(settings),
        default_language=settings.default_language,
        bind=settings.bind_modifications,
    )
