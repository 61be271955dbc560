"""Patient, doctor and hospital endpoints.

All three collections share one router factory driven by the record
editor configuration, so they behave identically:

- ``GET    /{collection}?q=``  search (empty query lists everything)
- ``POST   /{collection}``     create; 422 lists the missing required fields
- ``GET    /{collection}/{id}``
- ``PATCH  /{collection}/{id}`` change the fields sent
- ``DELETE /{collection}/{id}`` 204, also when the id is unknown
"""

# No ``from __future__ import annotations`` here: FastAPI has to see the
# per-collection models that the route annotations close over.

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from ...editor import DOCTOR_EDITOR, HOSPITAL_EDITOR, PATIENT_EDITOR, EditorConfig, RecordEditor, SubmitResult
from ...store import EntityStore, get_entity_store
from ..models.requests import DoctorInput, HospitalInput, PatientInput
from ..models.responses import RecordListResponse

logger = logging.getLogger(__name__)


def _submit_response(config: EditorConfig, result: SubmitResult, record_id: str | None = None):
    """Translate an editor submit result into a response or an HTTP error."""
    if result.accepted:
        return result.record
    if result.reason == "missing_fields":
        raise HTTPException(
            status_code=422,
            detail={
                "message": f"Missing required {config.name} fields: {', '.join(result.missing_fields)}",
                "missing_fields": result.missing_fields,
            },
        )
    if result.reason == "not_found":
        raise HTTPException(status_code=404, detail=f"{config.name.capitalize()} '{record_id}' not found")
    raise HTTPException(status_code=409, detail=f"Cannot submit {config.name}: {result.reason}")


def build_record_router(config: EditorConfig, input_model: type[BaseModel]) -> APIRouter:
    """Create the CRUD router for one collection."""
    router = APIRouter(prefix=f"/{config.collection}", tags=[config.collection])
    model = config.model
    list_model = RecordListResponse[model]

    def get_editor(store: EntityStore = Depends(get_entity_store)) -> RecordEditor:
        return RecordEditor(store.collection(config.collection), config)

    @router.get("", response_model=list_model)
    async def list_records(
        q: str = Query("", description=f"Search by {', '.join(config.search_fields)}"),
        editor: RecordEditor = Depends(get_editor),
    ):
        records = editor.filter(q)
        return list_model(items=records, total=len(records))

    @router.post("", response_model=model, status_code=201)
    async def create_record(request: input_model, editor: RecordEditor = Depends(get_editor)):
        editor.open_new()
        editor.update_draft(**request.model_dump())
        result = editor.submit()
        if result.accepted:
            logger.info("Created %s %s", config.name, result.record.id)
        return _submit_response(config, result)

    @router.get("/{record_id}", response_model=model)
    async def get_record(record_id: str, store: EntityStore = Depends(get_entity_store)):
        record = store.collection(config.collection).get(record_id)
        if record is None:
            raise HTTPException(status_code=404, detail=f"{config.name.capitalize()} '{record_id}' not found")
        return record

    @router.patch("/{record_id}", response_model=model)
    async def update_record(
        record_id: str,
        request: input_model,
        store: EntityStore = Depends(get_entity_store),
        editor: RecordEditor = Depends(get_editor),
    ):
        record = store.collection(config.collection).get(record_id)
        if record is None:
            raise HTTPException(status_code=404, detail=f"{config.name.capitalize()} '{record_id}' not found")
        editor.start_edit(record)
        editor.update_draft(**request.model_dump(exclude_unset=True))
        return _submit_response(config, editor.submit(), record_id)

    @router.delete("/{record_id}", status_code=204)
    async def delete_record(record_id: str, editor: RecordEditor = Depends(get_editor)) -> None:
        if not editor.delete(record_id):
            logger.debug("Delete of unknown %s %s ignored", config.name, record_id)

    return router


patients_router = build_record_router(PATIENT_EDITOR, PatientInput)
doctors_router = build_record_router(DOCTOR_EDITOR, DoctorInput)
hospitals_router = build_record_router(HOSPITAL_EDITOR, HospitalInput)
