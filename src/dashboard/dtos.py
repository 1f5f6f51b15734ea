from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID


class EventNotFoundError(Exception):
    """Raised when the requested event does not exist."""

    def __init__(self, event_id: UUID) -> None:
        self.event_id = event_id
        super().__init__(f"Event '{event_id}' not found")


class UnauthorizedEventAccessError(Exception):
    """Raised when an event exists but belongs to another host."""

    def __init__(self, event_id: UUID, host_email: str) -> None:
        self.event_id = event_id
        self.host_email = host_email
        super().__init__(f"Event '{event_id}' does not belong to host '{host_email}'")


class UnsupportedExportFormatError(Exception):
    """Raised when an export is requested in a format we cannot render."""

    def __init__(self, export_format: str) -> None:
        self.export_format = export_format
        super().__init__(f"Unsupported export format '{export_format}'")


class Attendance(str, Enum):
    YES = "yes"
    NO = "no"
    MAYBE = "maybe"


class ExportFormat(str, Enum):
    CSV = "csv"
    JSON = "json"
    EXCEL = "excel"


class SortBy(str, Enum):
    NAME = "name"
    EMAIL = "email"
    ATTENDANCE = "attendance"
    GUEST_COUNT = "guestCount"
    SUBMITTED_AT = "submittedAt"


@dataclass(frozen=True)
class ResponseRecord:
    """One guest's submitted answer for one invite."""

    id: UUID
    event_id: UUID
    invite_id: UUID
    guest_name: str
    guest_email: str
    attendance: Attendance
    guest_count: int
    submitted_at: datetime
    dietary_options: tuple[str, ...] = ()
    dietary_restrictions: str = ""
    guest_phone: str = ""
    emergency_contact: str = ""
    message: str = ""
    ip_address: str | None = None
    user_agent: str | None = None

    def __post_init__(self):
        # tags behave like a set: duplicates collapse, first occurrence wins
        object.__setattr__(self, "dietary_options", tuple(dict.fromkeys(self.dietary_options)))


@dataclass(frozen=True)
class EventSummary:
    """Read-only view of an event as needed by the dashboard."""

    id: UUID
    date: datetime
    host_email: str
    name: str = ""
    time: str | None = None
    location: str | None = None
    host_name: str | None = None
    status: str | None = None


@dataclass(frozen=True)
class InviteCounts:
    total_invites: int = 0
    total_responses: int = 0
    response_rate: float = 0


@dataclass(frozen=True)
class ResponseFilters:
    """Parsed filter and sort options. Every field is optional."""

    attendance: str | None = None
    search: str | None = None
    dietary_options: tuple[str, ...] = ()
    guest_count_min: int | None = None
    guest_count_max: int | None = None
    date_start: datetime | None = None
    date_end: datetime | None = None
    sort_by: str | None = None


@dataclass(frozen=True)
class FilteredResponses:
    responses: list[ResponseRecord]
    total_count: int
    original_count: int


# =============================================================================
# Dashboard snapshot
# =============================================================================


@dataclass(frozen=True)
class DashboardSummary:
    total_invites: int
    total_responses: int
    response_rate: float
    attending: int
    not_attending: int
    maybe: int
    total_guests: int
    pending_responses: int


@dataclass(frozen=True)
class DashboardAnalytics:
    attendance_rate: float = 0
    average_guests_per_response: float = 0
    average_response_time: float = 0
    peak_response_day: str | None = None
    peak_response_hour: int | None = None
    dietary_breakdown: dict[str, int] = field(default_factory=dict)
    guest_count_distribution: dict[int, int] = field(default_factory=dict)


@dataclass(frozen=True)
class DailyTrend:
    responses: int = 0
    attending: int = 0
    not_attending: int = 0
    maybe: int = 0
    total_guests: int = 0


@dataclass(frozen=True)
class DietaryAnalysis:
    total_with_dietary: int = 0
    total_without_dietary: int = 0
    preferences: dict[str, int] = field(default_factory=dict)
    restrictions: dict[str, int] = field(default_factory=dict)
    common_combinations: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class GuestAnalysis:
    total_responses: int = 0
    total_guests: int = 0
    average_guests_per_response: float = 0
    guest_count_distribution: dict[int, int] = field(default_factory=dict)
    solo_attendees: int = 0
    group_attendees: int = 0
    max_group_size: int = 0


@dataclass(frozen=True)
class ResponsePattern:
    date: str
    responses: int
    attending: int
    total_guests: int


@dataclass(frozen=True)
class Milestone:
    percentage: int
    count: int
    date: datetime
    days_until_event: int


@dataclass(frozen=True)
class Timeline:
    days_until_event: list[int] = field(default_factory=list)
    response_patterns: dict[int, ResponsePattern] = field(default_factory=dict)
    milestones: list[Milestone] = field(default_factory=list)


@dataclass(frozen=True)
class DashboardSnapshot:
    """All derived aggregates for one event, computed fresh per request."""

    event: EventSummary
    summary: DashboardSummary
    analytics: DashboardAnalytics
    trends: dict[str, DailyTrend]
    dietary_analysis: DietaryAnalysis
    guest_analysis: GuestAnalysis
    timeline: Timeline
    responses: list[ResponseRecord] = field(default_factory=list)


@dataclass(frozen=True)
class ExportDTO:
    content: str
    content_type: str
    filename: str


@dataclass(frozen=True)
class HostEventAnalyticsDTO:
    """Compact per-event summary for a host's overview."""

    event_id: UUID
    event_name: str
    event_date: datetime
    event_status: str | None
    total_invites: int
    total_responses: int
    response_rate: float
    attending: int
    total_guests: int
