from datetime import datetime
from uuid import UUID

from sqlalchemy import JSON, DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.dashboard.dtos import Attendance
from src.models.base import Base, TimeStamp


class Event(Base, TimeStamp):
    __tablename__ = TableNames.EVENTS.value

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=True)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    # display time as entered by the host, e.g. "18:30"
    time: Mapped[str] = mapped_column(String(50), nullable=True)
    location: Mapped[str] = mapped_column(String(500), nullable=True)
    host_email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    host_name: Mapped[str] = mapped_column(String(255), nullable=True)
    status: Mapped[str] = mapped_column(String(50), nullable=True, default="active")

    def __repr__(self) -> str:
        return f"<Event {self.name} on {self.date}>"


class Invite(Base, TimeStamp):
    __tablename__ = TableNames.INVITES.value

    event_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.EVENTS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # empty for anonymous invites
    guest_name: Mapped[str] = mapped_column(String(255), nullable=True)
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="active")

    def __repr__(self) -> str:
        return f"<Invite {self.uuid} for event {self.event_id}>"


class RSVPResponse(Base, TimeStamp):
    __tablename__ = TableNames.RSVP_RESPONSES.value

    event_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.EVENTS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    invite_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.INVITES.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    guest_name: Mapped[str] = mapped_column(String(255), nullable=False)
    guest_email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    guest_phone: Mapped[str] = mapped_column(String(50), nullable=True)
    emergency_contact: Mapped[str] = mapped_column(String(255), nullable=True)
    attendance: Mapped[str] = mapped_column(
        Enum(
            Attendance,
            name="attendance_enum",
            values_callable=lambda x: [e.value for e in x],
        ),
        nullable=False,
    )
    guest_count: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    dietary_options: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    dietary_restrictions: Mapped[str] = mapped_column(Text, nullable=True)
    message: Mapped[str] = mapped_column(Text, nullable=True)
    submitted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    ip_address: Mapped[str] = mapped_column(String(64), nullable=True)
    user_agent: Mapped[str] = mapped_column(String(500), nullable=True)

    def __repr__(self) -> str:
        return f"<RSVPResponse {self.guest_email} - {self.attendance}>"
