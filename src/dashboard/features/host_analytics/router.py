from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.dashboard.dependencies import get_dashboard_orchestrator, get_host_email
from src.dashboard.dtos import HostEventAnalyticsDTO
from src.dashboard.orchestrator import DashboardOrchestrator
from src.dashboard.urls import HOST_ANALYTICS_URL

router = APIRouter()


class HostAnalyticsResponse(BaseModel):
    events: list[HostEventAnalyticsDTO]
    count: int


@router.get(HOST_ANALYTICS_URL, response_model=HostAnalyticsResponse)
async def get_host_analytics(
    host_email: str = Depends(get_host_email),
    orchestrator: DashboardOrchestrator = Depends(get_dashboard_orchestrator),
) -> HostAnalyticsResponse:
    """RSVP summary for every event of the requesting host, newest first."""
    events = await orchestrator.get_host_analytics(host_email)
    return HostAnalyticsResponse(events=events, count=len(events))
