"""Catalog provider interface."""
from abc import ABC, abstractmethod
from typing import List

from pydantic import BaseModel, ConfigDict


class VoiceMenuMapping(BaseModel):
    """Spoken forms of one catalog product."""

    model_config = ConfigDict(frozen=True)

    canonical_id: str
    spoken_names: List[str] = []  # First entry is the primary name
    aliases: List[str] = []


class CatalogProvider(ABC):
    """Abstract base class for spoken-menu catalog providers."""

    @abstractmethod
    async def get_catalog(self, tenant_id: str) -> List[VoiceMenuMapping]:
        """Get a point-in-time snapshot of a tenant's catalog."""
        pass

    @abstractmethod
    async def list_tenants(self) -> List[str]:
        """Get the tenants this provider has catalogs for."""
        pass
