"""Voice order interpretation endpoints."""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from voice_order.core.config import settings
from voice_order.core.dependencies import get_catalog_repository, get_voice_order_service
from voice_order.services.lexicon.languages import Language, UnsupportedLanguageError
from voice_order.services.menu.base import VoiceMenuMapping
from voice_order.services.menu.repository import CatalogRepository
from voice_order.services.ordering.models import ParsedOrder, ParsedOrderItem
from voice_order.services.ordering.parser import VoiceOrderService

router = APIRouter()
logger = logging.getLogger(__name__)


class ParseRequest(BaseModel):
    """Transcript parse request."""
    transcript: str
    language: Optional[str] = None
    tenant_id: Optional[str] = None
    catalog: Optional[List[VoiceMenuMapping]] = None
    bind_modifications: Optional[bool] = None


class MatchRequest(BaseModel):
    """Menu match request for already parsed items."""
    items: List[ParsedOrderItem]
    tenant_id: Optional[str] = None
    catalog: Optional[List[VoiceMenuMapping]] = None


class LanguageResponse(BaseModel):
    """Supported language response model."""
    code: str
    locale: str


@router.get("/api/voice/languages", response_model=List[LanguageResponse])
async def list_languages():
    """List the languages transcripts can be parsed in."""
    return [LanguageResponse(code=language.value, locale=language.locale) for language in Language]


@router.post("/api/voice/parse", response_model=ParsedOrder)
async def parse_transcript(
    request: Request,
    body: ParseRequest,
    service: VoiceOrderService = Depends(get_voice_order_service),
):
    """Parse a transcript and match its items against the tenant catalog."""
    tenant_id = body.tenant_id or settings.default_tenant
    logger.info(
        f"[VOICE PARSE] Request received - tenant: {tenant_id}, language: {body.language}, "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )

    try:
        order = await service.interpret(
            body.transcript,
            tenant_id=tenant_id,
            language=body.language,
            catalog=body.catalog,
            bind=body.bind_modifications,
        )
    except UnsupportedLanguageError as e:
        logger.warning(f"[VOICE PARSE] Rejected request - {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(
            f"[VOICE PARSE] Error parsing transcript - tenant: {tenant_id}, "
            f"Error: {type(e).__name__}: {str(e)}",
            exc_info=True
        )
        raise HTTPException(status_code=500, detail=f"Error parsing transcript: {str(e)}")

    logger.debug(f"[VOICE PARSE] Parsed {len(order.items)} items")
    return order


@router.post("/api/voice/match", response_model=List[ParsedOrderItem])
async def match_items(
    body: MatchRequest,
    service: VoiceOrderService = Depends(get_voice_order_service),
):
    """Match parsed items against the tenant catalog without re-parsing."""
    tenant_id = body.tenant_id or settings.default_tenant
    logger.info(f"[VOICE MATCH] Request received - tenant: {tenant_id}, items: {len(body.items)}")

    try:
        return await service.rematch(body.items, tenant_id=tenant_id, catalog=body.catalog)
    except Exception as e:
        logger.error(
            f"[VOICE MATCH] Error matching items - tenant: {tenant_id}, "
            f"Error: {type(e).__name__}: {str(e)}",
            exc_info=True
        )
        raise HTTPException(status_code=500, detail=f"Error matching items: {str(e)}")


@router.get("/api/voice/catalog/{tenant_id}", response_model=List[VoiceMenuMapping])
async def get_catalog(
    tenant_id: str,
    catalog_repository: CatalogRepository = Depends(get_catalog_repository),
):
    """Get the spoken-menu catalog of a tenant."""
    tenants = await catalog_repository.list_tenants()
    if tenant_id not in tenants:
        raise HTTPException(status_code=404, detail=f"No catalog for tenant '{tenant_id}'")
    return await catalog_repository.get_catalog(tenant_id)
