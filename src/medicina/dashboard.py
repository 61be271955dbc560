"""Financial overview shown on the dashboard."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field

from .store.models import Patient, PaymentStatus


class DashboardSummary(BaseModel):
    """Totals across all patients plus the most recent ones."""

    total_received: float = Field(..., description="Sum of amounts for PAID patients")
    total_pending: float = Field(..., description="Sum of amounts for PENDING patients")
    patient_count: int
    recent_patients: list[Patient] = Field(default_factory=list)


def summarize(patients: Sequence[Patient], recent: int = 5) -> DashboardSummary:
    """Summarize *patients* (in stored order, newest first)."""
    return DashboardSummary(
        total_received=sum(p.amount for p in patients if p.status == PaymentStatus.PAID),
        total_pending=sum(p.amount for p in patients if p.status == PaymentStatus.PENDING),
        patient_count=len(patients),
        recent_patients=list(patients[:recent]),
    )
