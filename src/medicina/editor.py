"""Record editor shared by the patient, doctor and hospital screens.

A single ``RecordEditor`` drives create/update/delete and search for any
entity collection. What differs between entity types (required fields,
searchable fields, form defaults) lives in an ``EditorConfig``.

Editor states:
    CLOSED   -> CREATING      open_new()
    CLOSED   -> EDITING(id)   start_edit(record)
    CREATING -> CLOSED        cancel_edit() or an accepted submit()
    EDITING  -> CLOSED        cancel_edit() or an accepted submit()

A submit with missing required fields is rejected: the store is untouched and
the editor keeps its state and draft so the form can be corrected.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from .store.entity_store import EntityCollection
from .store.models import Doctor, Hospital, Patient, PaymentStatus

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseModel)


class EditorState(str, Enum):
    """Editor lifecycle states."""

    CLOSED = "closed"
    CREATING = "creating"
    EDITING = "editing"


@dataclass(frozen=True)
class EditorConfig:
    """Per-entity editor configuration."""

    name: str
    model: type[BaseModel]
    collection: str
    required_fields: tuple[str, ...]
    search_fields: tuple[str, ...]
    defaults: dict[str, Any] = field(default_factory=dict)


PATIENT_EDITOR = EditorConfig(
    name="patient",
    model=Patient,
    collection="patients",
    required_fields=("name", "cpf"),
    search_fields=("name", "cpf"),
    defaults={"status": PaymentStatus.PENDING, "amount": 0},
)

DOCTOR_EDITOR = EditorConfig(
    name="doctor",
    model=Doctor,
    collection="doctors",
    required_fields=("name", "crm", "specialty"),
    search_fields=("name", "crm", "specialty"),
)

HOSPITAL_EDITOR = EditorConfig(
    name="hospital",
    model=Hospital,
    collection="hospitals",
    required_fields=("name", "cnpj"),
    search_fields=("name", "cnpj"),
)


@dataclass
class SubmitResult(Generic[E]):
    """Outcome of ``RecordEditor.submit``.

    ``reason`` is one of ``"missing_fields"``, ``"not_open"`` or
    ``"not_found"`` when the submit was not accepted.
    """

    accepted: bool
    record: E | None = None
    missing_fields: list[str] = field(default_factory=list)
    reason: str | None = None


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def filter_records(records: Iterable[E], query: str, search_fields: Sequence[str]) -> list[E]:
    """Case-insensitive substring search over *search_fields*.

    Only an empty query matches every record; whitespace is part of the
    needle. Order is preserved.
    """
    needle = (query or "").lower()
    if not needle:
        return list(records)
    return [
        record
        for record in records
        if any(needle in str(getattr(record, name, "") or "").lower() for name in search_fields)
    ]


class RecordEditor(Generic[E]):
    """Create/update/delete/search against one entity collection."""

    def __init__(self, collection: EntityCollection[E], config: EditorConfig):
        self._collection = collection
        self._config = config
        self._state = EditorState.CLOSED
        self._editing_id: str | None = None
        self._draft: dict[str, Any] = dict(config.defaults)

    @property
    def config(self) -> EditorConfig:
        return self._config

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def editing_id(self) -> str | None:
        return self._editing_id

    @property
    def draft(self) -> dict[str, Any]:
        return dict(self._draft)

    # ------------------------------------------------------------------
    # Search & validation
    # ------------------------------------------------------------------

    def filter(self, query: str) -> list[E]:
        """Search the collection with this editor's search fields."""
        return filter_records(self._collection.list(), query, self._config.search_fields)

    def missing_fields(self, draft: dict[str, Any] | None = None) -> list[str]:
        """Required fields that are empty in *draft* (default: the live draft)."""
        draft = self._draft if draft is None else draft
        return [name for name in self._config.required_fields if _is_blank(draft.get(name))]

    def validate_for_submit(self, draft: dict[str, Any] | None = None) -> bool:
        """Check that every required field is filled in."""
        return not self.missing_fields(draft)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def open_new(self) -> dict[str, Any]:
        """Start a new record from the configured defaults."""
        self._reset()
        self._state = EditorState.CREATING
        return self.draft

    def start_edit(self, record: E) -> dict[str, Any]:
        """Seed the draft from *record*; the next submit updates it."""
        self._draft = record.model_dump(exclude={"id"})
        self._editing_id = record.id
        self._state = EditorState.EDITING
        return self.draft

    def update_draft(self, **changes: Any) -> dict[str, Any]:
        """Change fields on the live draft. Ignored while the editor is closed."""
        if self._state is EditorState.CLOSED:
            logger.debug("Ignoring draft change on closed %s editor", self._config.name)
            return self.draft
        self._draft.update(changes)
        return self.draft

    def cancel_edit(self) -> None:
        """Discard the draft and close the editor."""
        self._reset()

    def submit(self) -> SubmitResult[E]:
        """Add or update the record described by the draft."""
        if self._state is EditorState.CLOSED:
            return SubmitResult(accepted=False, reason="not_open")

        missing = self.missing_fields()
        if missing:
            logger.info("Rejected %s submit, missing fields: %s", self._config.name, ", ".join(missing))
            return SubmitResult(accepted=False, missing_fields=missing, reason="missing_fields")

        if self._state is EditorState.CREATING:
            record = self._collection.add(self._draft)
            self._reset()
            return SubmitResult(accepted=True, record=record)

        record = self._collection.model(**{**self._draft, "id": self._editing_id})
        found = self._collection.update(record)
        self._reset()
        if not found:
            return SubmitResult(accepted=False, reason="not_found")
        return SubmitResult(accepted=True, record=record)

    def delete(self, record_id: str) -> bool:
        """Delete a record by id; closes the editor if it was editing that record."""
        if self._editing_id == record_id:
            self._reset()
        return self._collection.delete(record_id)

    def _reset(self) -> None:
        self._draft = dict(self._config.defaults)
        self._editing_id = None
        self._state = EditorState.CLOSED
