"""Entry point of the dashboard: fetch from the store, then hand off to the analytics engine."""

import logging
from datetime import UTC, date, datetime
from uuid import UUID

from src.dashboard.analytics.aggregation import compute_dashboard, compute_summary
from src.dashboard.analytics.export import (
    export_content_type,
    export_dashboard,
    export_filename,
    parse_export_format,
)
from src.dashboard.analytics.filtering import filter_responses
from src.dashboard.analytics.utils import as_utc
from src.dashboard.dtos import (
    DashboardSnapshot,
    EventNotFoundError,
    EventSummary,
    ExportDTO,
    ExportFormat,
    FilteredResponses,
    HostEventAnalyticsDTO,
    InviteCounts,
    ResponseFilters,
    ResponseRecord,
    UnauthorizedEventAccessError,
)
from src.dashboard.repository.read_models import ResponseStore

logger = logging.getLogger(__name__)


class DashboardOrchestrator:
    """
    Loads an event's data from a ResponseStore and runs the analytics on it.

    Every call fetches fresh data; nothing is kept between calls.
    """

    def __init__(self, store: ResponseStore) -> None:
        self._store = store

    async def _get_owned_event(self, event_id: UUID, host_email: str) -> EventSummary:
        event = await self._store.get_event(event_id)
        if not event:
            raise EventNotFoundError(event_id)
        if event.host_email != host_email:
            raise UnauthorizedEventAccessError(event_id, host_email)
        return event

    async def _load(
        self, event_id: UUID, host_email: str
    ) -> tuple[EventSummary, list[ResponseRecord], InviteCounts]:
        event = await self._get_owned_event(event_id, host_email)
        try:
            responses = await self._store.list_responses(event_id)
            invite_counts = await self._store.get_invite_counts(event_id)
        except Exception as e:
            logger.error(f"Failed to load RSVP data for event {event_id}: {e}")
            raise
        return event, responses, invite_counts

    async def get_dashboard(self, event_id: UUID, host_email: str) -> DashboardSnapshot:
        event, responses, invite_counts = await self._load(event_id, host_email)
        logger.debug(f"Computing dashboard for event {event_id} from {len(responses)} responses")
        return compute_dashboard(responses, event, invite_counts)

    async def filter_responses(
        self, event_id: UUID, filters: ResponseFilters, host_email: str
    ) -> FilteredResponses:
        await self._get_owned_event(event_id, host_email)
        try:
            responses = await self._store.list_responses(event_id)
        except Exception as e:
            logger.error(f"Failed to load RSVP responses for event {event_id}: {e}")
            raise
        return filter_responses(responses, filters)

    async def export_dashboard(
        self,
        event_id: UUID,
        export_format: str | ExportFormat,
        host_email: str,
        today: date | None = None,
    ) -> ExportDTO:
        # reject unknown formats before touching the store
        export_format = parse_export_format(export_format)
        snapshot = await self.get_dashboard(event_id, host_email)
        exported_at = datetime.now(UTC)

        content = export_dashboard(
            snapshot,
            export_format=export_format,
            exported_by=host_email,
            exported_at=exported_at,
        )
        return ExportDTO(
            content=content,
            content_type=export_content_type(export_format),
            filename=export_filename(event_id, export_format, today or exported_at.date()),
        )

    async def get_host_analytics(self, host_email: str) -> list[HostEventAnalyticsDTO]:
        """Summary per event owned by the host, most recent event date first.

        An event whose data cannot be loaded is logged and left out.
        """
        events = await self._store.list_events_by_host(host_email)

        analytics = []
        for event in events:
            try:
                responses = await self._store.list_responses(event.id)
                invite_counts = await self._store.get_invite_counts(event.id)
            except Exception as e:
                logger.error(f"Failed to get analytics for event {event.id}: {e}")
                continue

            summary = compute_summary(responses, invite_counts)
            analytics.append(
                HostEventAnalyticsDTO(
                    event_id=event.id,
                    event_name=event.name,
                    event_date=event.date,
                    event_status=event.status,
                    total_invites=summary.total_invites,
                    total_responses=summary.total_responses,
                    response_rate=summary.response_rate,
                    attending=summary.attending,
                    total_guests=summary.total_guests,
                )
            )

        return sorted(analytics, key=lambda item: as_utc(item.event_date), reverse=True)
