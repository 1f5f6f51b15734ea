from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from src.dashboard.analytics.validation import to_response_filters, validate_filters
from src.dashboard.dependencies import get_dashboard_orchestrator, get_host_email
from src.dashboard.dtos import (
    EventNotFoundError,
    ResponseRecord,
    UnauthorizedEventAccessError,
)
from src.dashboard.orchestrator import DashboardOrchestrator
from src.dashboard.schemas import FilterRequest
from src.dashboard.urls import FILTER_RESPONSES_URL

router = APIRouter()


class FilterResponsesResponse(BaseModel):
    responses: list[ResponseRecord]
    total_count: int
    original_count: int
    message: str


@router.post(FILTER_RESPONSES_URL, response_model=FilterResponsesResponse)
async def filter_responses(
    event_id: UUID,
    filters: FilterRequest,
    host_email: str = Depends(get_host_email),
    orchestrator: DashboardOrchestrator = Depends(get_dashboard_orchestrator),
) -> FilterResponsesResponse:
    """
    Filter, search and sort the responses of an event.
    All validation problems are reported together in a 422.
    """
    errors = validate_filters(filters)
    if errors:
        raise HTTPException(status_code=422, detail=errors)

    try:
        result = await orchestrator.filter_responses(
            event_id=event_id,
            filters=to_response_filters(filters),
            host_email=host_email,
        )
    except EventNotFoundError:
        raise HTTPException(status_code=404, detail="Event not found")
    except UnauthorizedEventAccessError:
        raise HTTPException(status_code=403, detail="Event does not belong to this host")

    return FilterResponsesResponse(
        responses=result.responses,
        total_count=result.total_count,
        original_count=result.original_count,
        message=f"Filtered {result.total_count} responses from {result.original_count} total",
    )
