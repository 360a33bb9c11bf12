"""Pydantic models for dashboard and validation history views."""

from datetime import datetime
from typing import Literal

from material_ai.models.material import CamelModel, MaterialStatus


class KeyMetrics(CamelModel):
    total_entries: int
    duplicates_prevented: int
    validation_errors: int
    risk_reduction_percentage: float
    qualified_vendor_usage: float
    avg_risk_score: float


class DuplicateTrendPoint(CamelModel):
    month: str
    duplicates: int
    prevented: int


class ValidationTypeShare(CamelModel):
    name: str
    value: int


class RiskTrendPoint(CamelModel):
    week: str
    avg_risk: float


class VendorQualificationShare(CamelModel):
    type: str
    count: int
    percentage: float


class DashboardStats(CamelModel):
    metrics: KeyMetrics
    duplicate_detection: list[DuplicateTrendPoint]
    validation_types: list[ValidationTypeShare]
    risk_trend: list[RiskTrendPoint]
    vendor_qualification: list[VendorQualificationShare]
    generated_at: datetime


class HistoryItem(CamelModel):
    """One past validation run of a submitted material."""

    id: str
    material_code: str
    description: str
    submitted_by: str
    timestamp: datetime
    status: MaterialStatus
    risk_score: int
    issues: list[str]
    duplicates_found: int
    ai_actions: list[str]


HistorySortKey = Literal["timestamp", "riskScore"]
