from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from src.dashboard.dependencies import get_dashboard_orchestrator, get_host_email
from src.dashboard.dtos import (
    EventNotFoundError,
    UnauthorizedEventAccessError,
    UnsupportedExportFormatError,
)
from src.dashboard.orchestrator import DashboardOrchestrator
from src.dashboard.urls import EXPORT_DASHBOARD_URL

router = APIRouter()


@router.get(EXPORT_DASHBOARD_URL)
async def export_dashboard(
    event_id: UUID,
    export_format: str = Query("csv", alias="format"),
    host_email: str = Depends(get_host_email),
    orchestrator: DashboardOrchestrator = Depends(get_dashboard_orchestrator),
) -> Response:
    """
    Download the dashboard of an event as csv, json or excel.
    The excel download is the csv export.
    """
    try:
        export = await orchestrator.export_dashboard(
            event_id=event_id,
            export_format=export_format,
            host_email=host_email,
        )
    except UnsupportedExportFormatError:
        raise HTTPException(status_code=400, detail="Format must be csv, json, or excel")
    except EventNotFoundError:
        raise HTTPException(status_code=404, detail="Event not found")
    except UnauthorizedEventAccessError:
        raise HTTPException(status_code=403, detail="Event does not belong to this host")

    return Response(
        content=export.content,
        media_type=export.content_type,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )
