"""Tests for letterhead resolution."""

from medicina.documents import resolve_header
from medicina.store import ClinicSettings, Hospital


SETTINGS = ClinicSettings(
    name="Clínica Vida",
    cnpj="00.000.000/0001-00",
    address="Rua A, 1",
    phone="(11) 1111-1111",
    email="contato@vida.com",
    logo="https://vida.example/logo.png",
)


def test_no_hospital_uses_settings():
    header = resolve_header(None, SETTINGS)

    assert header.name == SETTINGS.name
    assert header.cnpj == SETTINGS.cnpj
    assert header.address == SETTINGS.address
    assert header.phone == SETTINGS.phone
    assert header.logo == SETTINGS.logo


def test_hospital_fields_take_precedence():
    hospital = Hospital(id="h1", name="Hospital Central", cnpj="12.345.678/0001-90", address="Av. B, 2", phone="(11) 2222-2222")

    header = resolve_header(hospital, SETTINGS)

    assert header.name == "Hospital Central"
    assert header.cnpj == "12.345.678/0001-90"
    assert header.address == "Av. B, 2"
    assert header.phone == "(11) 2222-2222"


def test_empty_hospital_fields_fall_back_per_field():
    hospital = Hospital(id="h1", name="Hospital Central", phone="")

    header = resolve_header(hospital, SETTINGS)

    assert header.name == "Hospital Central"
    assert header.cnpj == SETTINGS.cnpj
    assert header.phone == SETTINGS.phone


def test_logo_falls_back_to_clinic_logo(store):
    with_logo = store.hospitals.add({"name": "A", "cnpj": "1", "logo": "data:image/png;base64,AAAA"})
    without_logo = store.hospitals.add({"name": "B", "cnpj": "2"})

    assert resolve_header(with_logo, SETTINGS).logo == "data:image/png;base64,AAAA"
    assert resolve_header(without_logo, SETTINGS).logo == SETTINGS.logo


def test_resolution_is_deterministic():
    hospital = Hospital(id="h1", name="Hospital Central")

    assert resolve_header(hospital, SETTINGS) == resolve_header(hospital, SETTINGS)


def test_empty_settings_give_empty_header():
    header = resolve_header(None, ClinicSettings())

    assert header.model_dump() == {"name": "", "cnpj": "", "address": "", "phone": "", "logo": ""}
