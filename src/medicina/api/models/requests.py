"""API request schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ...documents.composer import DocumentKind, PaperSize
from ...store.models import PaymentStatus


# =============================================================================
# Record Request Models
# =============================================================================
# Required fields are checked by the record editor, not here, so a missing
# name comes back as a list of missing fields instead of a schema error.


class PatientInput(BaseModel):
    """Patient form fields. On PATCH only the fields sent are changed."""

    name: str = Field(default="", description="Patient full name")
    cpf: str = Field(default="", description="Tax id (CPF)")
    email: str = ""
    phone: str = ""
    birth_date: str = Field(default="", description="Date of birth (YYYY-MM-DD)")
    status: PaymentStatus = Field(default=PaymentStatus.PENDING)
    amount: float = Field(default=0, description="Amount charged")


class DoctorInput(BaseModel):
    """Doctor form fields."""

    name: str = ""
    crm: str = Field(default="", description="Medical license number (CRM)")
    specialty: str = ""
    email: str = ""
    phone: str = ""


class HospitalInput(BaseModel):
    """Hospital form fields."""

    name: str = ""
    cnpj: str = Field(default="", description="Company registration id (CNPJ)")
    address: str = ""
    phone: str = ""
    logo: str | None = Field(default=None, description="Logo URL or data URI")


# =============================================================================
# Document Request Models
# =============================================================================


class DraftCertificateRequest(BaseModel):
    """Request to draft a certificate body with the text assist."""

    diagnosis: str = Field(..., description="Clinical picture or diagnosis")
    observations: str = Field(default="", description="Additional observations")
    days_off: str = Field(default="1", description="Days of leave")


class RefineTextRequest(BaseModel):
    """Request to refine free text for a document."""

    text: str = Field(..., description="Text to refine")
    kind: DocumentKind = Field(..., description="certificate or prescription")


class ComposeRequest(BaseModel):
    """Selections and content for composing a document.

    Unknown or missing ids are allowed and render as placeholders.
    """

    hospital_id: str | None = Field(default=None, description="Hospital letterhead; clinic settings if unset")
    patient_id: str | None = None
    doctor_id: str | None = None
    body_text: str = Field(default="", description="Certificate text or prescription content")
    paper_size: PaperSize = Field(default=PaperSize.A4)
    reference: str | None = Field(default=None, description="Prescription reference; generated if unset")
