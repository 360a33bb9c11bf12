"""Dashboard and validation history endpoints (demonstration figures)."""

from typing import List, Optional

from fastapi import APIRouter, Query

from material_ai.data.dashboard import dashboard_stats, search_history
from material_ai.models.dashboard import DashboardStats, HistoryItem, HistorySortKey
from material_ai.models.material import MaterialStatus

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get("/dashboard/stats", response_model=DashboardStats)
async def get_dashboard_stats():
    return dashboard_stats()


@router.get("/history", response_model=List[HistoryItem])
async def get_history(
    q: str = Query("", max_length=100),
    status: Optional[MaterialStatus] = Query(None),
    sort_by: HistorySortKey = Query("timestamp"),
):
    return search_history(q, status, sort_by)
