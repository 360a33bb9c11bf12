"""Pydantic models for material master records and business partners."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

QUALIFIED_VENDOR_PREFIX = "200"


class CamelModel(BaseModel):
    """Base model exposing camelCase JSON while keeping snake_case attributes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MaterialStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Material(CamelModel):
    """Material master record."""

    id: str
    material_code: str
    description: str
    material_type: str = ""
    plant_code: str = ""
    vendor_id: str = ""
    manufacturer_id: str = ""
    unit_of_measure: str = ""
    category: str = ""
    base_price: Optional[float] = None
    created_at: datetime = Field(default_factory=datetime.now)
    status: MaterialStatus = MaterialStatus.PENDING


class Vendor(CamelModel):
    """Vendor master record.

    Qualification is derived from the id: only the 200xxx series is
    approved for use.
    """

    id: str
    name: str
    code: str = ""
    category: list[str] = Field(default_factory=list)
    linked_manufacturers: list[str] = Field(default_factory=list)

    @computed_field(alias="isQualified")
    @property
    def is_qualified(self) -> bool:
        return self.id.startswith(QUALIFIED_VENDOR_PREFIX)


class Manufacturer(CamelModel):
    """Manufacturer master record."""

    id: str
    name: str
    code: str = ""
    linked_vendors: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)
