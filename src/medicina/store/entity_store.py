"""In-memory entity storage for patients, doctors and hospitals."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from .models import ClinicSettings, Doctor, Hospital, Patient

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseModel)

ID_LENGTH = 9


class EntityCollection(Generic[E]):
    """Ordered, in-memory collection of records keyed by ``id``.

    New records go to the front, so iteration order is most-recent-first.
    Updates and deletes against an unknown id do nothing and report ``False``
    instead of raising.
    """

    def __init__(self, model: type[E], records: Iterable[E] | None = None):
        self._model = model
        self._records: list[E] = list(records or [])

    @property
    def model(self) -> type[E]:
        return self._model

    def _new_id(self) -> str:
        existing = {record.id for record in self._records}
        while True:
            candidate = uuid.uuid4().hex[:ID_LENGTH]
            if candidate not in existing:
                return candidate

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def add(self, fields: Mapping[str, Any]) -> E:
        """Store a new record built from *fields* and return it.

        Any ``id`` in *fields* is ignored; a fresh one is generated.
        """
        data = {key: value for key, value in fields.items() if key != "id"}
        record = self._model(id=self._new_id(), **data)
        self._records.insert(0, record)
        logger.debug("Added %s %s", self._model.__name__, record.id)
        return record

    def update(self, record: E) -> bool:
        """Replace the stored record with the same id. Returns True if found."""
        for index, existing in enumerate(self._records):
            if existing.id == record.id:
                self._records[index] = record
                return True
        logger.debug("Update skipped, no %s with id %s", self._model.__name__, record.id)
        return False

    def delete(self, record_id: str) -> bool:
        """Delete a record. Returns True if the record existed."""
        for index, existing in enumerate(self._records):
            if existing.id == record_id:
                del self._records[index]
                return True
        return False

    def get(self, record_id: str | None) -> E | None:
        """Get a record by id, or None when the id is empty or unknown."""
        if not record_id:
            return None
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def list(self) -> list[E]:
        """List all records in stored order."""
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)


class EntityStore:
    """Owner of the three entity collections and the clinic settings."""

    def __init__(self) -> None:
        self.patients: EntityCollection[Patient] = EntityCollection(Patient)
        self.doctors: EntityCollection[Doctor] = EntityCollection(Doctor)
        self.hospitals: EntityCollection[Hospital] = EntityCollection(Hospital)
        self._settings = ClinicSettings()

    def collection(self, name: str) -> EntityCollection[Any]:
        """Get a collection by its attribute name (patients, doctors, hospitals)."""
        if name not in ("patients", "doctors", "hospitals"):
            raise KeyError(f"Unknown collection: {name}")
        return getattr(self, name)

    @property
    def settings(self) -> ClinicSettings:
        return self._settings

    def set_settings(self, settings: ClinicSettings) -> ClinicSettings:
        """Replace the clinic settings wholesale."""
        self._settings = settings.model_copy()
        logger.info("Clinic settings updated")
        return self._settings


# Global instance (singleton pattern for FastAPI dependency injection)
_entity_store: EntityStore | None = None


def init_entity_store() -> EntityStore:
    """Create and set the global entity store. Call once during startup."""
    global _entity_store
    _entity_store = EntityStore()
    return _entity_store


def get_entity_store() -> EntityStore:
    """Get the global entity store instance (used by FastAPI Depends)."""
    global _entity_store
    if _entity_store is None:
        _entity_store = EntityStore()
    return _entity_store
