"""Pydantic models for suggestion, validation and analysis APIs."""

from typing import Literal, Optional

from pydantic import Field

from material_ai.models.material import CamelModel, Material

ValidationStatus = Literal["valid", "warning", "error"]
MatchType = Literal["exact", "similar", "fuzzy"]


class ValidationResult(CamelModel):
    """Data-quality finding for a single field."""

    field: str
    status: ValidationStatus
    message: str
    suggestion: Optional[str] = None


class DuplicateMatch(CamelModel):
    """Existing material that resembles a new entry."""

    material: Material
    similarity: float
    match_type: MatchType


class MaterialDraft(CamelModel):
    """Partially filled material entry form."""

    material_code: str = ""
    description: str = ""
    material_type: str = ""
    plant_code: str = ""
    vendor_id: str = ""
    manufacturer_id: str = ""
    unit_of_measure: str = ""
    category: str = ""
    base_price: Optional[float] = None


class AIAnalysis(CamelModel):
    """Full entry analysis: duplicates, field findings, suggestions and risk."""

    duplicates: list[DuplicateMatch] = Field(default_factory=list)
    validations: list[ValidationResult] = Field(default_factory=list)
    suggestions: dict[str, list[str]] = Field(default_factory=dict)
    risk_score: int = 0


class SuggestionContext(CamelModel):
    description: str = ""
    material_type: str = ""
    material_code: str = ""
    category: str = ""


class SuggestionRequest(CamelModel):
    field: str
    context: SuggestionContext = Field(default_factory=SuggestionContext)


class SuggestionResponse(CamelModel):
    suggestions: list[str]


class AnalyzeRequest(CamelModel):
    """SAP-style entry form as posted by the material entry page.

    ``material`` carries the material code; the description falls back to
    it when ``materialDescription`` is empty.
    """

    material: str = ""
    material_description: str = ""
    material_type: str = ""
    material_group: str = ""
    base_unit_of_measure: str = ""
    industry_sector: str = ""

    @property
    def description_text(self) -> str:
        return self.material_description or self.material


class AnalyzeResponse(CamelModel):
    suggestions: dict[str, list[str]]
    validations: list[ValidationResult]
    risk_score: int
    duplicates: list[DuplicateMatch] = Field(default_factory=list)


class DuplicateSearchRequest(CamelModel):
    description: str = ""


class LinkageRequest(CamelModel):
    vendor_id: str
    manufacturer_id: str
