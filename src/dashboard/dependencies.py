from fastapi import Depends, Header, HTTPException

from src.dashboard.orchestrator import DashboardOrchestrator
from src.dashboard.repository.read_models import ResponseStore, SqlResponseStore


def get_response_store() -> ResponseStore:
    """Dependency to get the response store. Override in tests."""
    return SqlResponseStore()


def get_dashboard_orchestrator(
    store: ResponseStore = Depends(get_response_store),
) -> DashboardOrchestrator:
    return DashboardOrchestrator(store)


def get_host_email(x_host_email: str | None = Header(default=None)) -> str:
    """
    Email of the host making the request.

    The session layer in front of this API authenticates the host and
    forwards its email in the X-Host-Email header.
    """
    if not x_host_email:
        raise HTTPException(status_code=401, detail="Authentication required")
    return x_host_email
