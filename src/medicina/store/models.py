"""Entity data models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class PaymentStatus(str, Enum):
    """Financial status of a patient."""

    PAID = "PAID"
    PENDING = "PENDING"


class Patient(BaseModel):
    """A patient record."""

    id: str = Field(..., description="Unique patient identifier")
    name: str = Field(default="", description="Patient full name")
    cpf: str = Field(default="", description="Tax id (CPF), stored as typed")
    email: str = Field(default="")
    phone: str = Field(default="")
    birth_date: str = Field(default="", description="Date of birth (YYYY-MM-DD)")
    status: PaymentStatus = Field(default=PaymentStatus.PENDING)
    amount: float = Field(default=0, description="Amount charged to the patient")


class Doctor(BaseModel):
    """A doctor record."""

    id: str = Field(..., description="Unique doctor identifier")
    name: str = Field(default="")
    crm: str = Field(default="", description="Medical license number (CRM)")
    specialty: str = Field(default="")
    email: str = Field(default="")
    phone: str = Field(default="")


class Hospital(BaseModel):
    """A hospital unit whose identity can replace the clinic letterhead."""

    id: str = Field(..., description="Unique hospital identifier")
    name: str = Field(default="")
    cnpj: str = Field(default="", description="Company registration id (CNPJ)")
    address: str = Field(default="")
    phone: str = Field(default="")
    logo: str | None = Field(default=None, description="Logo URL or data URI")


class ClinicSettings(BaseModel):
    """Clinic-wide defaults used when no hospital is selected."""

    name: str = ""
    cnpj: str = ""
    address: str = ""
    phone: str = ""
    email: str = ""
    logo: str = ""
