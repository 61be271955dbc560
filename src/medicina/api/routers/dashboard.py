"""Dashboard endpoint."""

from fastapi import APIRouter, Depends, Query

from ...dashboard import DashboardSummary, summarize
from ...store import EntityStore, get_entity_store

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardSummary)
async def get_dashboard(
    recent: int = Query(5, ge=0, le=50, description="Number of recent patients to include"),
    store: EntityStore = Depends(get_entity_store),
) -> DashboardSummary:
    """Financial totals and the latest patients."""
    return summarize(store.patients.list(), recent=recent)
