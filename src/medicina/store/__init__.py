"""In-memory entity store.

Usage:
    from medicina.store import get_entity_store

    store = get_entity_store()
    patient = store.patients.add({"name": "Ana Silva", "cpf": "111.111.111-11"})
"""

from .entity_store import (
    EntityCollection,
    EntityStore,
    get_entity_store,
    init_entity_store,
)
from .models import ClinicSettings, Doctor, Hospital, Patient, PaymentStatus

__all__ = [
    # Store
    "EntityCollection",
    "EntityStore",
    "get_entity_store",
    "init_entity_store",
    # Models
    "Patient",
    "Doctor",
    "Hospital",
    "ClinicSettings",
    "PaymentStatus",
]
