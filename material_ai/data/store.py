"""Data provider for master data: mock arrays or imported client arrays.

A single DataStore lives on app.state and is injected into services.
Readers take an immutable snapshot; imports fully replace one client
list under a lock, so concurrent imports serialize instead of clobbering
each other half-way.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import Lock
from typing import Iterable, Optional

from material_ai.data.mock_data import MOCK_MANUFACTURERS, MOCK_MATERIALS, MOCK_VENDORS
from material_ai.models.material import Manufacturer, Material, Vendor

logger = logging.getLogger(__name__)

ENTITIES = ("materials", "vendors", "manufacturers")


@dataclass(frozen=True)
class DataSnapshot:
    """Point-in-time view of the master data a request works against."""

    materials: tuple[Material, ...]
    vendors: tuple[Vendor, ...]
    manufacturers: tuple[Manufacturer, ...]
    sources: dict[str, str]

    def find_vendor(self, vendor_id: str) -> Optional[Vendor]:
        return next((v for v in self.vendors if v.id == vendor_id), None)

    def find_manufacturer(self, manufacturer_id: str) -> Optional[Manufacturer]:
        return next((m for m in self.manufacturers if m.id == manufacturer_id), None)


class DataStore:
    """Holds mock and client master data plus the real-data toggle."""

    def __init__(
        self,
        use_real_data: bool = False,
        mock_materials: Iterable[Material] = MOCK_MATERIALS,
        mock_vendors: Iterable[Vendor] = MOCK_VENDORS,
        mock_manufacturers: Iterable[Manufacturer] = MOCK_MANUFACTURERS,
    ) -> None:
        self._lock = Lock()
        self._use_real_data = use_real_data
        self._mock = {
            "materials": tuple(mock_materials),
            "vendors": tuple(mock_vendors),
            "manufacturers": tuple(mock_manufacturers),
        }
        self._client: dict[str, tuple] = {name: () for name in ENTITIES}

    @property
    def use_real_data(self) -> bool:
        return self._use_real_data

    def set_use_real_data(self, enabled: bool) -> None:
        with self._lock:
            self._use_real_data = enabled
        logger.info("Switched to %s data", "real client" if enabled else "mock")

    def snapshot(self) -> DataSnapshot:
        """Resolve each entity list: client data when enabled and non-empty, else mock."""
        with self._lock:
            chosen: dict[str, tuple] = {}
            sources: dict[str, str] = {}
            for name in ENTITIES:
                client = self._client[name]
                if self._use_real_data and client:
                    chosen[name], sources[name] = client, "client"
                else:
                    chosen[name], sources[name] = self._mock[name], "mock"
        return DataSnapshot(
            materials=chosen["materials"],
            vendors=chosen["vendors"],
            manufacturers=chosen["manufacturers"],
            sources=sources,
        )

    def client_counts(self) -> dict[str, int]:
        with self._lock:
            return {name: len(records) for name, records in self._client.items()}

    def replace_materials(self, materials: Iterable[Material]) -> int:
        return self._replace("materials", materials)

    def replace_vendors(self, vendors: Iterable[Vendor]) -> int:
        return self._replace("vendors", vendors)

    def replace_manufacturers(self, manufacturers: Iterable[Manufacturer]) -> int:
        return self._replace("manufacturers", manufacturers)

    def _replace(self, name: str, records: Iterable) -> int:
        records = tuple(records)
        with self._lock:
            self._client[name] = records
        logger.info("Imported %d client %s", len(records), name)
        return len(records)
