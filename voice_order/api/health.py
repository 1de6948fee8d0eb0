"""Health check endpoint."""
import logging
from fastapi import APIRouter, Depends, Request

from voice_order.core.dependencies import get_catalog_repository
from voice_order.services.lexicon.languages import Language
from voice_order.services.menu.repository import CatalogRepository

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check(
    request: Request,
    catalog_repository: CatalogRepository = Depends(get_catalog_repository),
):
    """Report supported languages and the tenants with a loaded catalog."""
    logger.debug(
        f"[HEALTH] Health check requested - Client: {request.client.host if request.client else 'unknown'}"
    )
    return {
        "status": "healthy",
        "languages": [language.value for language in Language],
        "tenants": await catalog_repository.list_tenants(),
    }
