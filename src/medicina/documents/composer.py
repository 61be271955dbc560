"""Certificate and prescription composition.

The composer turns a resolved letterhead, the selected patient and doctor,
free text and a paper size into a ``ComposedDocument``: a structure the HTML
and PDF surfaces can render without further lookups.

Missing selections are never an error here. An absent patient or doctor
renders placeholder tokens, and it is up to the caller to refuse an export
when no patient is selected (see ``documents.export.require_patient``).
"""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field, computed_field

from ..store.models import Doctor, Patient
from .header import DocumentHeader

PLACEHOLDER_NAME = "________________"
PLACEHOLDER_CPF = "000.000.000-00"
PLACEHOLDER_DOCTOR = "Responsible Physician"
PLACEHOLDER_CRM = "00000"
PLACEHOLDER_SPECIALTY = "SPECIALTY"

CERTIFICATE_TITLE = "MEDICAL CERTIFICATE"
PRESCRIPTION_TITLE = "PRESCRIPTION"

CERTIFICATE_OPENING = (
    "I hereby certify, for all due purposes, that Mr./Ms. {name}, "
    "registered under CPF no. {cpf}, was seen at this health unit on this date."
)
CERTIFICATE_HINT = "Fill in the clinical details or generate the text to preview the certificate."
PRESCRIPTION_HINT = "Prescribe the medical instructions..."

MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


class DocumentKind(str, Enum):
    """Kinds of printable documents."""

    CERTIFICATE = "certificate"
    PRESCRIPTION = "prescription"


class PaperSize(str, Enum):
    """Supported paper sizes."""

    A4 = "A4"
    A5 = "A5"


class PageLayout(BaseModel):
    """Layout parameters handed to the rendering surfaces."""

    paper_size: PaperSize
    width_mm: float
    height_mm: float
    padding_mm: float
    header_pt: int = Field(..., description="Letterhead name font size")
    title_pt: int = Field(..., description="Document title font size")
    body_pt: int = Field(..., description="Body text font size")
    small_pt: int = Field(..., description="Letterhead details and footer font size")
    logo_height_mm: float


class SignatureBlock(BaseModel):
    """Doctor signature region."""

    name: str
    crm: str
    specialty: str

    @computed_field
    @property
    def license_line(self) -> str:
        return f"CRM {self.crm} - {self.specialty}"


class DocumentBody(BaseModel):
    """Body region: a fixed opening line followed by the free text."""

    opening: str
    text: str = ""
    has_content: bool = False
    hint: str | None = None
    patient_name: str = PLACEHOLDER_NAME
    patient_cpf: str = PLACEHOLDER_CPF


class ComposedDocument(BaseModel):
    """A fully composed certificate or prescription."""

    kind: DocumentKind
    title: str
    layout: PageLayout
    letterhead: DocumentHeader
    body: DocumentBody
    signature: SignatureBlock
    issued_on: date | None = None
    date_line: str = ""
    reference: str | None = None
    footer: str = ""

    @property
    def paper_size(self) -> PaperSize:
        return self.layout.paper_size


def page_layout(paper_size: PaperSize, kind: DocumentKind) -> PageLayout:
    """Layout parameters for *paper_size*; prescriptions use narrower margins."""
    padding = 20.0 if kind == DocumentKind.CERTIFICATE else 15.0
    if paper_size == PaperSize.A5:
        return PageLayout(
            paper_size=paper_size,
            width_mm=148.5,
            height_mm=210.0,
            padding_mm=padding,
            header_pt=16,
            title_pt=20,
            body_pt=11,
            small_pt=7,
            logo_height_mm=12.0,
        )
    return PageLayout(
        paper_size=paper_size,
        width_mm=210.0,
        height_mm=297.0,
        padding_mm=padding,
        header_pt=20,
        title_pt=24,
        body_pt=13,
        small_pt=8,
        logo_height_mm=16.0,
    )


def format_long_date(value: date) -> str:
    """Format a date as '19 October 2026'."""
    return f"{value.day} {MONTHS[value.month - 1]} {value.year}"


def _signature(doctor: Doctor | None) -> SignatureBlock:
    return SignatureBlock(
        name=(doctor.name if doctor else "") or PLACEHOLDER_DOCTOR,
        crm=(doctor.crm if doctor else "") or PLACEHOLDER_CRM,
        specialty=(doctor.specialty if doctor else "") or PLACEHOLDER_SPECIALTY,
    )


def _footer(header: DocumentHeader) -> str:
    parts = []
    if header.address:
        parts.append(header.address)
    if header.phone:
        parts.append(f"Tel: {header.phone}")
    return " | ".join(parts)


def compose_certificate(
    header: DocumentHeader,
    patient: Patient | None,
    doctor: Doctor | None,
    body_text: str,
    paper_size: PaperSize = PaperSize.A4,
    issued_on: date | None = None,
) -> ComposedDocument:
    """Compose a medical certificate.

    Args:
        header: Resolved letterhead.
        patient: Selected patient, or None.
        doctor: Selected doctor, or None.
        body_text: Clinical text typed by the user or produced by the assist.
        paper_size: Target paper size; affects layout only.
        issued_on: Date printed under the body, omitted when None.

    Returns:
        The composed document.
    """
    name = (patient.name if patient else "") or PLACEHOLDER_NAME
    cpf = (patient.cpf if patient else "") or PLACEHOLDER_CPF
    text = body_text or ""
    has_content = bool(text.strip())

    body = DocumentBody(
        opening=CERTIFICATE_OPENING.format(name=name, cpf=cpf),
        text=text,
        has_content=has_content,
        hint=None if has_content else CERTIFICATE_HINT,
        patient_name=name,
        patient_cpf=cpf,
    )
    return ComposedDocument(
        kind=DocumentKind.CERTIFICATE,
        title=CERTIFICATE_TITLE,
        layout=page_layout(paper_size, DocumentKind.CERTIFICATE),
        letterhead=header,
        body=body,
        signature=_signature(doctor),
        issued_on=issued_on,
        date_line=format_long_date(issued_on) if issued_on else "",
        footer=_footer(header),
    )


def compose_prescription(
    header: DocumentHeader,
    patient: Patient | None,
    doctor: Doctor | None,
    body_text: str,
    paper_size: PaperSize = PaperSize.A4,
    issued_on: date | None = None,
    reference: str | None = None,
) -> ComposedDocument:
    """Compose a prescription. ``reference`` is printed next to the date."""
    name = (patient.name if patient else "") or PLACEHOLDER_NAME
    cpf = (patient.cpf if patient else "") or PLACEHOLDER_CPF
    text = body_text or ""
    has_content = bool(text.strip())

    body = DocumentBody(
        opening=f"PATIENT: {name}",
        text=text,
        has_content=has_content,
        hint=None if has_content else PRESCRIPTION_HINT,
        patient_name=name,
        patient_cpf=cpf,
    )
    return ComposedDocument(
        kind=DocumentKind.PRESCRIPTION,
        title=PRESCRIPTION_TITLE,
        layout=page_layout(paper_size, DocumentKind.PRESCRIPTION),
        letterhead=header,
        body=body,
        signature=_signature(doctor),
        issued_on=issued_on,
        date_line=format_long_date(issued_on) if issued_on else "",
        reference=reference,
        footer=_footer(header),
    )


def compose_document(
    kind: DocumentKind,
    header: DocumentHeader,
    patient: Patient | None,
    doctor: Doctor | None,
    body_text: str,
    paper_size: PaperSize = PaperSize.A4,
    issued_on: date | None = None,
    reference: str | None = None,
) -> ComposedDocument:
    """Dispatch to the composer for *kind*."""
    if kind == DocumentKind.CERTIFICATE:
        return compose_certificate(header, patient, doctor, body_text, paper_size, issued_on)
    return compose_prescription(header, patient, doctor, body_text, paper_size, issued_on, reference)
