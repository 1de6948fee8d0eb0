"""Catalog repository."""
from typing import List

from voice_order.services.menu.base import CatalogProvider, VoiceMenuMapping


class CatalogRepository:
    """Repository for spoken-menu catalog reads."""

    def __init__(self, provider: CatalogProvider):
        self.provider = provider

    async def get_catalog(self, tenant_id: str) -> List[VoiceMenuMapping]:
        """Get a tenant's catalog snapshot."""
        return await self.provider.get_catalog(tenant_id)

    async def list_tenants(self) -> List[str]:
        """Get the known tenants."""
        return await self.provider.list_tenants()
