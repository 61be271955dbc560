"""Certificate and prescription endpoints.

Compose, preview and export documents from the current selections, and
draft or refine their text with the text assist.
"""

from __future__ import annotations

import logging
import random
from datetime import date
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse, Response

from ...assist import TextAssist, get_text_assist
from ...documents import (
    ComposedDocument,
    DocumentKind,
    compose_document,
    export_filename,
    render_html,
    render_pdf,
    require_patient,
    resolve_header,
)
from ...exceptions import ExportError, ExportPreconditionError
from ...store import EntityStore, Patient, get_entity_store
from ..models.requests import ComposeRequest, DraftCertificateRequest, RefineTextRequest
from ..models.responses import DraftResponse, RefineResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])


def _compose(
    kind: DocumentKind,
    request: ComposeRequest,
    store: EntityStore,
) -> tuple[ComposedDocument, Patient | None]:
    """Look up the selections and compose the document."""
    hospital = store.hospitals.get(request.hospital_id)
    patient = store.patients.get(request.patient_id)
    doctor = store.doctors.get(request.doctor_id)

    reference = request.reference
    if kind == DocumentKind.PRESCRIPTION and not reference:
        reference = str(random.randint(0, 9999))

    document = compose_document(
        kind,
        resolve_header(hospital, store.settings),
        patient,
        doctor,
        request.body_text,
        request.paper_size,
        issued_on=date.today(),
        reference=reference,
    )
    return document, patient


@router.post("/certificate/draft", response_model=DraftResponse)
async def draft_certificate(
    request: DraftCertificateRequest,
    assist: TextAssist = Depends(get_text_assist),
) -> DraftResponse:
    """Draft the certificate body from a diagnosis."""
    if not request.diagnosis.strip():
        raise HTTPException(status_code=422, detail="Please provide the clinical picture or diagnosis.")

    text = await assist.draft_certificate_body(request.diagnosis, request.observations, request.days_off)
    return DraftResponse(text=text, generated=bool(text))


@router.post("/refine", response_model=RefineResponse)
async def refine_text(
    request: RefineTextRequest,
    assist: TextAssist = Depends(get_text_assist),
) -> RefineResponse:
    """Rewrite text in a formal register. Returns the input unchanged on failure."""
    text = await assist.refine_text(request.text, request.kind)
    return RefineResponse(text=text, refined=text != request.text)


@router.post("/{kind}/compose", response_model=ComposedDocument)
async def compose(
    kind: DocumentKind,
    request: ComposeRequest,
    store: EntityStore = Depends(get_entity_store),
) -> ComposedDocument:
    """Compose a document as structured regions."""
    document, _ = _compose(kind, request, store)
    return document


@router.post("/{kind}/html", response_class=HTMLResponse)
async def preview(
    kind: DocumentKind,
    request: ComposeRequest,
    store: EntityStore = Depends(get_entity_store),
) -> HTMLResponse:
    """Render the document as a printable HTML page."""
    document, _ = _compose(kind, request, store)
    return HTMLResponse(render_html(document))


@router.post("/{kind}/export")
async def export(
    kind: DocumentKind,
    request: ComposeRequest,
    store: EntityStore = Depends(get_entity_store),
) -> Response:
    """Download the document as a PDF named after the patient."""
    document, patient = _compose(kind, request, store)
    try:
        patient = require_patient(patient)
    except ExportPreconditionError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        pdf = await run_in_threadpool(render_pdf, document)
    except ExportError as e:
        raise HTTPException(status_code=500, detail=f"{e} Try printing the HTML preview instead.")

    filename = export_filename(kind, patient.name)
    logger.info("Exported %s for patient %s", kind.value, patient.id)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}"},
    )
