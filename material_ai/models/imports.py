"""Pydantic models for client data import."""

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from material_ai.models.material import CamelModel, Material, MaterialStatus, Manufacturer, Vendor

DataType = Literal["materials", "vendors", "manufacturers"]


def _split_list(value: Any) -> list[str]:
    """Accept a JSON list or a pipe-separated CSV cell: 'STEEL|METAL' -> ['STEEL', 'METAL']."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(item).strip() for item in value if str(item).strip()]
    return [item.strip() for item in str(value).split("|") if item.strip()]


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class _ImportRow(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True, coerce_numbers_to_str=True)


class MaterialImportRow(_ImportRow):
    """One material row from a client file."""

    material_code: str = Field(
        min_length=1, validation_alias=AliasChoices("materialCode", "material_code", "code")
    )
    description: str = Field(min_length=1)
    material_type: str = Field("", validation_alias=AliasChoices("materialType", "material_type"))
    plant_code: str = Field("", validation_alias=AliasChoices("plantCode", "plant_code", "plant"))
    vendor_id: str = Field("", validation_alias=AliasChoices("vendorId", "vendor_id", "vendor"))
    manufacturer_id: str = Field(
        "", validation_alias=AliasChoices("manufacturerId", "manufacturer_id", "manufacturer")
    )
    unit_of_measure: str = Field(
        "", validation_alias=AliasChoices("unitOfMeasure", "unit_of_measure", "unit")
    )
    category: str = ""
    base_price: Optional[float] = Field(
        None, validation_alias=AliasChoices("basePrice", "base_price", "price")
    )
    created_at: Optional[datetime] = Field(
        None, validation_alias=AliasChoices("createdAt", "created_at")
    )
    status: MaterialStatus = MaterialStatus.APPROVED

    @field_validator("base_price", "created_at", mode="before")
    @classmethod
    def blank_is_missing(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("status", mode="before")
    @classmethod
    def default_status(cls, value: Any) -> Any:
        if _blank_to_none(value) is None:
            return MaterialStatus.APPROVED
        return str(value).lower()

    def to_material(self, index: int) -> Material:
        data = self.model_dump(exclude_none=True)
        return Material(id=f"client_{index + 1}", **data)


class VendorImportRow(_ImportRow):
    """One vendor row from a client file."""

    id: str = Field(min_length=1, validation_alias=AliasChoices("id", "code", "vendorCode"))
    name: str = Field(min_length=1, validation_alias=AliasChoices("name", "vendorName"))
    code: str = Field("", validation_alias=AliasChoices("code", "vendorCode", "id"))
    category: list[str] = Field(default_factory=list)
    linked_manufacturers: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("linkedManufacturers", "linked_manufacturers"),
    )

    @field_validator("category", "linked_manufacturers", mode="before")
    @classmethod
    def split_lists(cls, value: Any) -> list[str]:
        return _split_list(value)

    def to_vendor(self) -> Vendor:
        return Vendor(
            id=self.id,
            name=self.name,
            code=self.code or self.id,
            category=self.category,
            linked_manufacturers=self.linked_manufacturers,
        )


class ManufacturerImportRow(_ImportRow):
    """One manufacturer row from a client file."""

    id: str = Field(min_length=1, validation_alias=AliasChoices("id", "code", "manufacturerCode"))
    name: str = Field(min_length=1, validation_alias=AliasChoices("name", "manufacturerName"))
    code: str = Field("", validation_alias=AliasChoices("code", "manufacturerCode", "id"))
    linked_vendors: list[str] = Field(
        default_factory=list, validation_alias=AliasChoices("linkedVendors", "linked_vendors")
    )
    certifications: list[str] = Field(default_factory=list)

    @field_validator("linked_vendors", "certifications", mode="before")
    @classmethod
    def split_lists(cls, value: Any) -> list[str]:
        return _split_list(value)

    def to_manufacturer(self) -> Manufacturer:
        return Manufacturer(
            id=self.id,
            name=self.name,
            code=self.code or self.id,
            linked_vendors=self.linked_vendors,
            certifications=self.certifications,
        )


class RowError(CamelModel):
    row: int
    errors: list[str]


class ImportResult(CamelModel):
    success: bool
    message: str
    records_imported: int
    errors: list[RowError] = Field(default_factory=list)


class DataSourceUpdateRequest(CamelModel):
    use_real_data: bool


class DataSourceStatus(CamelModel):
    use_real_data: bool
    sources: dict[str, str]
    client_counts: dict[str, int]
