"""API data models."""

from .requests import (
    ComposeRequest,
    DoctorInput,
    DraftCertificateRequest,
    HospitalInput,
    PatientInput,
    RefineTextRequest,
)
from .responses import DraftResponse, HealthResponse, RecordListResponse, RefineResponse

__all__ = [
    # Request models
    "PatientInput",
    "DoctorInput",
    "HospitalInput",
    "DraftCertificateRequest",
    "RefineTextRequest",
    "ComposeRequest",
    # Response models
    "HealthResponse",
    "RecordListResponse",
    "DraftResponse",
    "RefineResponse",
]
