"""create_dashboard_tables

Revision ID: 3f6c1d2a9b7e
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "3f6c1d2a9b7e"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "events",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("time", sa.String(length=50), nullable=True),
        sa.Column("location", sa.String(length=500), nullable=True),
        sa.Column("host_email", sa.String(length=255), nullable=False),
        sa.Column("host_name", sa.String(length=255), nullable=True),
        sa.Column("status", sa.String(length=50), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index(op.f("ix_events_host_email"), "events", ["host_email"], unique=False)

    op.create_table(
        "invites",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("event_id", sa.UUID(), nullable=False),
        sa.Column("guest_name", sa.String(length=255), nullable=True),
        sa.Column("status", sa.String(length=50), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["event_id"], ["events.uuid"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index(op.f("ix_invites_event_id"), "invites", ["event_id"], unique=False)

    op.create_table(
        "rsvp_responses",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("event_id", sa.UUID(), nullable=False),
        sa.Column("invite_id", sa.UUID(), nullable=False),
        sa.Column("guest_name", sa.String(length=255), nullable=False),
        sa.Column("guest_email", sa.String(length=255), nullable=False),
        sa.Column("guest_phone", sa.String(length=50), nullable=True),
        sa.Column("emergency_contact", sa.String(length=255), nullable=True),
        sa.Column(
            "attendance",
            sa.Enum("yes", "no", "maybe", name="attendance_enum"),
            nullable=False,
        ),
        sa.Column("guest_count", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("dietary_options", sa.JSON(), nullable=False),
        sa.Column("dietary_restrictions", sa.Text(), nullable=True),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("submitted_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("ip_address", sa.String(length=64), nullable=True),
        sa.Column("user_agent", sa.String(length=500), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["event_id"], ["events.uuid"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["invite_id"], ["invites.uuid"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index(
        op.f("ix_rsvp_responses_event_id"), "rsvp_responses", ["event_id"], unique=False
    )
    op.create_index(
        op.f("ix_rsvp_responses_invite_id"), "rsvp_responses", ["invite_id"], unique=False
    )
    op.create_index(
        op.f("ix_rsvp_responses_guest_email"), "rsvp_responses", ["guest_email"], unique=False
    )
    op.create_index(
        op.f("ix_rsvp_responses_submitted_at"), "rsvp_responses", ["submitted_at"], unique=False
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_rsvp_responses_submitted_at"), table_name="rsvp_responses")
    op.drop_index(op.f("ix_rsvp_responses_guest_email"), table_name="rsvp_responses")
    op.drop_index(op.f("ix_rsvp_responses_invite_id"), table_name="rsvp_responses")
    op.drop_index(op.f("ix_rsvp_responses_event_id"), table_name="rsvp_responses")
    op.drop_table("rsvp_responses")
    op.drop_index(op.f("ix_invites_event_id"), table_name="invites")
    op.drop_table("invites")
    op.drop_index(op.f("ix_events_host_email"), table_name="events")
    op.drop_table("events")

    # Drop enum type
    sa.Enum(name="attendance_enum").drop(op.get_bind(), checkfirst=True)
