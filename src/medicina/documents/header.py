"""Letterhead resolution."""

from __future__ import annotations

from pydantic import BaseModel

from ..store.models import ClinicSettings, Hospital

HEADER_FIELDS = ("name", "cnpj", "address", "phone", "logo")


class DocumentHeader(BaseModel):
    """Letterhead fields printed at the top of a document."""

    name: str = ""
    cnpj: str = ""
    address: str = ""
    phone: str = ""
    logo: str = ""


def resolve_header(hospital: Hospital | None, settings: ClinicSettings) -> DocumentHeader:
    """Merge a hospital's identity with the clinic defaults.

    Each field comes from the hospital when one is selected and the field is
    filled in, otherwise from the clinic settings.
    """
    values = {}
    for name in HEADER_FIELDS:
        own = getattr(hospital, name, None) if hospital is not None else None
        values[name] = own or getattr(settings, name)
    return DocumentHeader(**values)
