"""Fixed demonstration figures for the dashboard and validation history."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from material_ai.models.dashboard import (
    DashboardStats,
    DuplicateTrendPoint,
    HistoryItem,
    KeyMetrics,
    RiskTrendPoint,
    ValidationTypeShare,
    VendorQualificationShare,
)
from material_ai.models.material import MaterialStatus

KEY_METRICS = KeyMetrics(
    total_entries=1247,
    duplicates_prevented=89,
    validation_errors=156,
    risk_reduction_percentage=67,
    qualified_vendor_usage=94.2,
    avg_risk_score=23.5,
)

DUPLICATE_DETECTION = [
    DuplicateTrendPoint(month="Jan", duplicates=12, prevented=11),
    DuplicateTrendPoint(month="Feb", duplicates=15, prevented=14),
    DuplicateTrendPoint(month="Mar", duplicates=8, prevented=8),
    DuplicateTrendPoint(month="Apr", duplicates=22, prevented=20),
    DuplicateTrendPoint(month="May", duplicates=18, prevented=17),
    DuplicateTrendPoint(month="Jun", duplicates=9, prevented=9),
]

VALIDATION_TYPES = [
    ValidationTypeShare(name="Field Validation", value=45),
    ValidationTypeShare(name="Duplicate Detection", value=30),
    ValidationTypeShare(name="Vendor Qualification", value=15),
    ValidationTypeShare(name="Linkage Validation", value=10),
]

RISK_TREND = [
    RiskTrendPoint(week="W1", avg_risk=35),
    RiskTrendPoint(week="W2", avg_risk=28),
    RiskTrendPoint(week="W3", avg_risk=32),
    RiskTrendPoint(week="W4", avg_risk=24),
    RiskTrendPoint(week="W5", avg_risk=19),
    RiskTrendPoint(week="W6", avg_risk=23),
]

VENDOR_QUALIFICATION = [
    VendorQualificationShare(type="Qualified (200xxx)", count=156, percentage=94.2),
    VendorQualificationShare(type="Unqualified (100xxx)", count=9, percentage=5.8),
]

HISTORY: tuple[HistoryItem, ...] = (
    HistoryItem(
        id="1",
        material_code="STL003",
        description="Steel Rod 8mm",
        submitted_by="John Doe",
        timestamp=datetime(2024, 1, 15, 10, 30),
        status=MaterialStatus.APPROVED,
        risk_score=15,
        issues=[],
        duplicates_found=0,
        ai_actions=["Auto-suggested material type: ROD", "Validated vendor qualification"],
    ),
    HistoryItem(
        id="2",
        material_code="CEM002",
        description="Portland Cement 25kg",
        submitted_by="Jane Smith",
        timestamp=datetime(2024, 1, 15, 9, 15),
        status=MaterialStatus.REJECTED,
        risk_score=75,
        issues=["Potential duplicate found", "Invalid vendor ID (100 series)"],
        duplicates_found=1,
        ai_actions=["Blocked duplicate entry", "Suggested qualified vendor"],
    ),
    HistoryItem(
        id="3",
        material_code="PIP001",
        description="PVC Pipe 6 inch",
        submitted_by="Mike Johnson",
        timestamp=datetime(2024, 1, 15, 8, 45),
        status=MaterialStatus.PENDING,
        risk_score=35,
        issues=["Vendor-manufacturer linkage warning"],
        duplicates_found=0,
        ai_actions=["Suggested unit of measure: M", "Flagged linkage issue"],
    ),
    HistoryItem(
        id="4",
        material_code="STL004",
        description="10mm Steel Rod",
        submitted_by="Sarah Wilson",
        timestamp=datetime(2024, 1, 14, 16, 20),
        status=MaterialStatus.REJECTED,
        risk_score=85,
        issues=["High similarity with existing material", "Missing required fields"],
        duplicates_found=2,
        ai_actions=["Detected 89% similarity", "Prevented duplicate creation"],
    ),
    HistoryItem(
        id="5",
        material_code="ELE001",
        description="Electrical Cable 2.5mm",
        submitted_by="Tom Brown",
        timestamp=datetime(2024, 1, 14, 14, 10),
        status=MaterialStatus.APPROVED,
        risk_score=22,
        issues=[],
        duplicates_found=0,
        ai_actions=["Auto-completed category: ELECTRICAL", "Validated all fields"],
    ),
)


def dashboard_stats() -> DashboardStats:
    return DashboardStats(
        metrics=KEY_METRICS,
        duplicate_detection=DUPLICATE_DETECTION,
        validation_types=VALIDATION_TYPES,
        risk_trend=RISK_TREND,
        vendor_qualification=VENDOR_QUALIFICATION,
        generated_at=datetime.now(),
    )


def search_history(
    query: str = "",
    status: Optional[MaterialStatus] = None,
    sort_by: str = "timestamp",
) -> list[HistoryItem]:
    """Filter by substring over code, description and submitter; newest or riskiest first."""
    needle = query.lower()
    items = [
        item
        for item in HISTORY
        if (
            needle in item.material_code.lower()
            or needle in item.description.lower()
            or needle in item.submitted_by.lower()
        )
        and (status is None or item.status == status)
    ]
    if sort_by == "riskScore":
        items.sort(key=lambda item: item.risk_score, reverse=True)
    else:
        items.sort(key=lambda item: item.timestamp, reverse=True)
    return items
