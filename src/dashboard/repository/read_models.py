"""Response store - read-only access to events, invites and responses. Returns DTOs, never ORM models."""

import abc
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.dashboard.analytics.utils import ratio
from src.dashboard.dtos import Attendance, EventSummary, InviteCounts, ResponseRecord
from src.dashboard.repository.orm_models import Event, Invite, RSVPResponse


class ResponseStore(abc.ABC):
    @abc.abstractmethod
    async def list_responses(self, event_id: UUID) -> list[ResponseRecord]:
        """All responses for an event, oldest submission first."""
        raise NotImplementedError

    @abc.abstractmethod
    async def get_event(self, event_id: UUID) -> EventSummary | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_invite_counts(self, event_id: UUID) -> InviteCounts:
        raise NotImplementedError

    @abc.abstractmethod
    async def list_events_by_host(self, host_email: str) -> list[EventSummary]:
        raise NotImplementedError


def event_to_dto(event: Event) -> EventSummary:
    return EventSummary(
        id=event.uuid,
        date=event.date,
        host_email=event.host_email,
        name=event.name,
        time=event.time,
        location=event.location,
        host_name=event.host_name,
        status=event.status,
    )


def response_to_dto(response: RSVPResponse) -> ResponseRecord:
    return ResponseRecord(
        id=response.uuid,
        event_id=response.event_id,
        invite_id=response.invite_id,
        guest_name=response.guest_name,
        guest_email=response.guest_email,
        attendance=Attendance(response.attendance),
        guest_count=response.guest_count,
        submitted_at=response.submitted_at,
        dietary_options=tuple(response.dietary_options or ()),
        dietary_restrictions=response.dietary_restrictions or "",
        guest_phone=response.guest_phone or "",
        emergency_contact=response.emergency_contact or "",
        message=response.message or "",
        ip_address=response.ip_address,
        user_agent=response.user_agent,
    )


class SqlResponseStore(ResponseStore):
    """SQL implementation of the response store."""

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def list_responses(self, event_id: UUID) -> list[ResponseRecord]:
        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            stmt = (
                select(RSVPResponse)
                .where(RSVPResponse.event_id == event_id)
                .order_by(RSVPResponse.submitted_at)
            )
            result = await session.execute(stmt)
            return [response_to_dto(response) for response in result.scalars().all()]

    async def get_event(self, event_id: UUID) -> EventSummary | None:
        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(select(Event).where(Event.uuid == event_id))
            event = result.scalar_one_or_none()
            if not event:
                return None
            return event_to_dto(event)

    async def get_invite_counts(self, event_id: UUID) -> InviteCounts:
        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            invites_stmt = (
                select(func.count()).select_from(Invite).where(Invite.event_id == event_id)
            )
            total_invites = (await session.execute(invites_stmt)).scalar_one()

            responses_stmt = (
                select(func.count())
                .select_from(RSVPResponse)
                .where(RSVPResponse.event_id == event_id)
            )
            total_responses = (await session.execute(responses_stmt)).scalar_one()

            return InviteCounts(
                total_invites=total_invites,
                total_responses=total_responses,
                response_rate=ratio(total_responses, total_invites, scale=100),
            )

    async def list_events_by_host(self, host_email: str) -> list[EventSummary]:
        async with async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(select(Event).where(Event.host_email == host_email))
            return [event_to_dto(event) for event in result.scalars().all()]
