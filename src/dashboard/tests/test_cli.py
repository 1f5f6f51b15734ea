"""Tests for the dashboard CLI commands."""

import json
from datetime import UTC, datetime

import pytest
from typer.testing import CliRunner

import cli
from src.dashboard.dtos import Attendance
from src.dashboard.tests.inmemory_store import (
    HOST_EMAIL,
    InMemoryResponseStore,
    create_test_event,
    create_test_response,
)

runner = CliRunner()


@pytest.fixture
def event():
    return create_test_event()


@pytest.fixture
def store(event, monkeypatch):
    responses = [
        create_test_response(
            event_id=event.id,
            attendance=Attendance.YES,
            guest_count=2,
            submitted_at=datetime(2026, 6, 18, 12, 0, tzinfo=UTC),
        ),
        create_test_response(
            event_id=event.id,
            guest_name="Jane Roe",
            attendance=Attendance.NO,
            submitted_at=datetime(2026, 6, 19, 9, 0, tzinfo=UTC),
        ),
    ]
    memory_store = InMemoryResponseStore(
        events=[event], responses=responses, invites={event.id: 4}
    )
    monkeypatch.setattr(cli, "get_store", lambda: memory_store)
    return memory_store


def test_summary(store, event):
    result = runner.invoke(cli.app, ["summary", str(event.id), "--host", HOST_EMAIL])

    assert result.exit_code == 0
    assert "Summer Garden Party (2026-06-20)" in result.output
    assert "Responses: 2/4 (50.0%)" in result.output
    assert "Total guests: 3" in result.output


def test_summary_other_host(store, event):
    result = runner.invoke(cli.app, ["summary", str(event.id), "--host", "other@example.com"])

    assert result.exit_code == 1


def test_export_json(store, event, tmp_path):
    target = tmp_path / "dashboard.json"

    result = runner.invoke(
        cli.app,
        ["export", str(event.id), "--host", HOST_EMAIL, "--format", "json", "--output", str(target)],
    )

    assert result.exit_code == 0
    data = json.loads(target.read_text(encoding="utf-8"))
    assert data["summary"]["total_responses"] == 2
    assert data["exported_by"] == HOST_EMAIL


def test_export_unsupported_format(store, event, tmp_path):
    target = tmp_path / "dashboard.pdf"

    result = runner.invoke(
        cli.app,
        ["export", str(event.id), "--host", HOST_EMAIL, "--format", "pdf", "--output", str(target)],
    )

    assert result.exit_code == 1
    assert not target.exists()


def test_host_analytics(store):
    result = runner.invoke(cli.app, ["host-analytics", "--host", HOST_EMAIL])

    assert result.exit_code == 0
    assert "Summer Garden Party" in result.output
    assert "2/4 responses (50.0%), 1 attending, 3 guests" in result.output
