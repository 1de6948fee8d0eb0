"""In-memory catalog provider."""
import logging
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from voice_order.services.menu.base import CatalogProvider, VoiceMenuMapping

logger = logging.getLogger(__name__)


class InMemoryCatalogProvider(CatalogProvider):
    """In-memory catalog provider using YAML configuration."""

    def __init__(self, catalog_file: Optional[str] = None):
        """Initialize with optional catalog file path."""
        if catalog_file is None:
            catalog_file = Path(__file__).parent / "data" / "catalog.yaml"
        self.catalog_file = Path(catalog_file)
        self._catalogs: Optional[Dict[str, List[VoiceMenuMapping]]] = None

    async def _load_catalogs(self) -> Dict[str, List[VoiceMenuMapping]]:
        """Load tenant catalogs from YAML file."""
        if self._catalogs is None:
            if not self.catalog_file.exists():
                logger.warning(f"[CATALOG] Catalog file {self.catalog_file} not found, using empty catalog")
                self._catalogs = {}
            else:
                with open(self.catalog_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
                self._catalogs = {
                    str(tenant_id): [VoiceMenuMapping(**entry) for entry in entries or []]
                    for tenant_id, entries in (data.get("tenants") or {}).items()
                }
                logger.info(
                    f"[CATALOG] Loaded {len(self._catalogs)} tenant catalogs from {self.catalog_file}"
                )
        return self._catalogs

    async def get_catalog(self, tenant_id: str) -> List[VoiceMenuMapping]:
        """Get a tenant's catalog, empty for unknown tenants."""
        catalogs = await self._load_catalogs()
        if tenant_id not in catalogs:
            logger.warning(f"[CATALOG] No catalog for tenant '{tenant_id}'")
        return list(catalogs.get(tenant_id, []))

    async def list_tenants(self) -> List[str]:
        """Get the tenants with a catalog."""
        catalogs = await self._load_catalogs()
        return list(catalogs)
