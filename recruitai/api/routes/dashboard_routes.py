"""
Dashboard Routes

GET /dashboard/stats - Counts shown on the signed-in home page
"""

from fastapi import APIRouter, Depends

from recruitai.core.auth import get_current_user
from recruitai.services.storage_service import JobDescriptionStore
from recruitai.schemas.schemas import DashboardStatsResponse

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])

# JD builder and sourcing are live; three tools are announced
ACTIVE_TOOLS = 2
COMING_SOON = 3


@router.get("/stats", response_model=DashboardStatsResponse)
def dashboard_stats(user: dict = Depends(get_current_user)):
    return DashboardStatsResponse(
        job_descriptions=JobDescriptionStore().count(user["id"]),
        active_tools=ACTIVE_TOOLS,
        coming_soon=COMING_SOON
    )
