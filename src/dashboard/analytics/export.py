"""
Render a dashboard snapshot as CSV or JSON text.

CSV values are written as-is: a comma inside a guest name or message is
not quoted and will shift the columns of that row. The "excel" format is
the same CSV text, there is no spreadsheet encoding.
"""

from collections.abc import Sequence
from datetime import UTC, date, datetime

from pydantic_core import to_json

from src.dashboard.analytics.utils import days_until_event
from src.dashboard.dtos import (
    DashboardSnapshot,
    ExportFormat,
    ResponseRecord,
    UnsupportedExportFormatError,
)

CSV_COLUMNS = (
    "Guest Name",
    "Guest Email",
    "Attendance",
    "Guest Count",
    "Dietary Options",
    "Dietary Restrictions",
    "Message",
    "Submitted At",
    "Response Time (Days Before Event)",
)

_CONTENT_TYPES = {
    ExportFormat.CSV: "text/csv",
    ExportFormat.EXCEL: "text/csv",
    ExportFormat.JSON: "application/json",
}

_EXTENSIONS = {
    ExportFormat.CSV: "csv",
    ExportFormat.EXCEL: "csv",
    ExportFormat.JSON: "json",
}


def parse_export_format(export_format: str | ExportFormat) -> ExportFormat:
    try:
        return ExportFormat(export_format)
    except ValueError:
        raise UnsupportedExportFormatError(str(export_format))


def export_content_type(export_format: str | ExportFormat) -> str:
    return _CONTENT_TYPES[parse_export_format(export_format)]


def export_filename(event_id, export_format: str | ExportFormat, on: date) -> str:
    extension = _EXTENSIONS[parse_export_format(export_format)]
    return f"rsvp-dashboard-{event_id}-{on.isoformat()}.{extension}"


def _text(value) -> str:
    return "" if value is None else str(value)


def _csv_row(response: ResponseRecord, event_date: datetime) -> str:
    row = [
        response.guest_name,
        response.guest_email,
        response.attendance.value,
        str(response.guest_count),
        "; ".join(response.dietary_options),
        response.dietary_restrictions or "",
        response.message or "",
        response.submitted_at.isoformat(),
        str(days_until_event(event_date, response.submitted_at)),
    ]
    return ",".join(row)


def to_csv(snapshot: DashboardSnapshot, responses: Sequence[ResponseRecord]) -> str:
    event = snapshot.event
    summary = snapshot.summary

    lines = [
        "EVENT SUMMARY",
        f"Event Name,{_text(event.name)}",
        f"Date,{event.date.isoformat()}",
        f"Time,{_text(event.time)}",
        f"Location,{_text(event.location)}",
        f"Host,{_text(event.host_name)}",
        f"Total Invites,{summary.total_invites}",
        f"Total Responses,{summary.total_responses}",
        f"Response Rate,{summary.response_rate}%",
        f"Attending,{summary.attending}",
        f"Total Guests,{summary.total_guests}",
        "",
        "RSVP RESPONSES",
        ",".join(CSV_COLUMNS),
    ]
    lines.extend(_csv_row(response, event.date) for response in responses)
    return "\n".join(lines)


def to_json_text(
    snapshot: DashboardSnapshot,
    responses: Sequence[ResponseRecord],
    exported_at: datetime,
    exported_by: str | None = None,
) -> str:
    export_data = {
        "event": snapshot.event,
        "summary": snapshot.summary,
        "responses": list(responses),
        "exported_at": exported_at,
        "exported_by": exported_by,
    }
    return to_json(export_data, indent=2).decode("utf-8")


def export_dashboard(
    snapshot: DashboardSnapshot,
    responses: Sequence[ResponseRecord] | None = None,
    export_format: str | ExportFormat = ExportFormat.CSV,
    exported_by: str | None = None,
    exported_at: datetime | None = None,
) -> str:
    """
    Render `responses` (the snapshot's own responses by default) in the
    given order together with the snapshot's event summary.
    """
    export_format = parse_export_format(export_format)
    if responses is None:
        responses = snapshot.responses

    if export_format == ExportFormat.JSON:
        return to_json_text(
            snapshot,
            responses,
            exported_at=exported_at or datetime.now(UTC),
            exported_by=exported_by,
        )
    return to_csv(snapshot, responses)
