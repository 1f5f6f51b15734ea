from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from src.dashboard.dependencies import get_dashboard_orchestrator, get_host_email
from src.dashboard.dtos import (
    DailyTrend,
    DashboardAnalytics,
    DashboardSnapshot,
    DashboardSummary,
    DietaryAnalysis,
    EventNotFoundError,
    EventSummary,
    GuestAnalysis,
    Timeline,
    UnauthorizedEventAccessError,
)
from src.dashboard.orchestrator import DashboardOrchestrator
from src.dashboard.urls import (
    DASHBOARD_ANALYTICS_URL,
    DASHBOARD_DIETARY_URL,
    DASHBOARD_GUESTS_URL,
    DASHBOARD_SUMMARY_URL,
    DASHBOARD_TIMELINE_URL,
    DASHBOARD_TRENDS_URL,
    DASHBOARD_URL,
)

router = APIRouter()


class SummaryResponse(BaseModel):
    summary: DashboardSummary
    event: EventSummary


class AnalyticsResponse(BaseModel):
    analytics: DashboardAnalytics
    trends: dict[str, DailyTrend]
    dietary_analysis: DietaryAnalysis
    guest_analysis: GuestAnalysis
    timeline: Timeline


class TrendsResponse(BaseModel):
    trends: dict[str, DailyTrend]
    timeline: Timeline


async def load_snapshot(
    orchestrator: DashboardOrchestrator, event_id: UUID, host_email: str
) -> DashboardSnapshot:
    """Compute the snapshot, mapping domain errors to HTTP errors."""
    try:
        return await orchestrator.get_dashboard(event_id, host_email)
    except EventNotFoundError:
        raise HTTPException(status_code=404, detail="Event not found")
    except UnauthorizedEventAccessError:
        raise HTTPException(status_code=403, detail="Event does not belong to this host")


@router.get(DASHBOARD_URL, response_model=DashboardSnapshot)
async def get_dashboard(
    event_id: UUID,
    host_email: str = Depends(get_host_email),
    orchestrator: DashboardOrchestrator = Depends(get_dashboard_orchestrator),
) -> DashboardSnapshot:
    """
    Get the full RSVP dashboard for an event: summary, analytics, trends,
    dietary and guest analysis, timeline and the responses themselves.
    """
    return await load_snapshot(orchestrator, event_id, host_email)


@router.get(DASHBOARD_SUMMARY_URL, response_model=SummaryResponse)
async def get_summary(
    event_id: UUID,
    host_email: str = Depends(get_host_email),
    orchestrator: DashboardOrchestrator = Depends(get_dashboard_orchestrator),
) -> SummaryResponse:
    snapshot = await load_snapshot(orchestrator, event_id, host_email)
    return SummaryResponse(summary=snapshot.summary, event=snapshot.event)


@router.get(DASHBOARD_ANALYTICS_URL, response_model=AnalyticsResponse)
async def get_analytics(
    event_id: UUID,
    host_email: str = Depends(get_host_email),
    orchestrator: DashboardOrchestrator = Depends(get_dashboard_orchestrator),
) -> AnalyticsResponse:
    snapshot = await load_snapshot(orchestrator, event_id, host_email)
    return AnalyticsResponse(
        analytics=snapshot.analytics,
        trends=snapshot.trends,
        dietary_analysis=snapshot.dietary_analysis,
        guest_analysis=snapshot.guest_analysis,
        timeline=snapshot.timeline,
    )


@router.get(DASHBOARD_TRENDS_URL, response_model=TrendsResponse)
async def get_trends(
    event_id: UUID,
    host_email: str = Depends(get_host_email),
    orchestrator: DashboardOrchestrator = Depends(get_dashboard_orchestrator),
) -> TrendsResponse:
    snapshot = await load_snapshot(orchestrator, event_id, host_email)
    return TrendsResponse(trends=snapshot.trends, timeline=snapshot.timeline)


@router.get(DASHBOARD_DIETARY_URL, response_model=DietaryAnalysis)
async def get_dietary_analysis(
    event_id: UUID,
    host_email: str = Depends(get_host_email),
    orchestrator: DashboardOrchestrator = Depends(get_dashboard_orchestrator),
) -> DietaryAnalysis:
    snapshot = await load_snapshot(orchestrator, event_id, host_email)
    return snapshot.dietary_analysis


@router.get(DASHBOARD_GUESTS_URL, response_model=GuestAnalysis)
async def get_guest_analysis(
    event_id: UUID,
    host_email: str = Depends(get_host_email),
    orchestrator: DashboardOrchestrator = Depends(get_dashboard_orchestrator),
) -> GuestAnalysis:
    snapshot = await load_snapshot(orchestrator, event_id, host_email)
    return snapshot.guest_analysis


@router.get(DASHBOARD_TIMELINE_URL, response_model=Timeline)
async def get_timeline(
    event_id: UUID,
    host_email: str = Depends(get_host_email),
    orchestrator: DashboardOrchestrator = Depends(get_dashboard_orchestrator),
) -> Timeline:
    snapshot = await load_snapshot(orchestrator, event_id, host_email)
    return snapshot.timeline
