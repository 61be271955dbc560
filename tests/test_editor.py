"""Tests for the record editor."""

from medicina.editor import (
    DOCTOR_EDITOR,
    HOSPITAL_EDITOR,
    PATIENT_EDITOR,
    EditorState,
    RecordEditor,
    filter_records,
)
from medicina.store import Doctor, EntityCollection, Patient, PaymentStatus


def _patient_editor(store):
    return RecordEditor(store.patients, PATIENT_EDITOR)


def test_add_patient_and_search(store):
    editor = _patient_editor(store)
    editor.open_new()
    editor.update_draft(name="Ana Silva", cpf="111.111.111-11", status=PaymentStatus.PENDING, amount=150)

    result = editor.submit()

    assert result.accepted
    records = store.patients.list()
    assert len(records) == 1
    assert records[0].name == "Ana Silva"
    assert records[0].cpf == "111.111.111-11"
    assert records[0].status == PaymentStatus.PENDING
    assert records[0].amount == 150
    assert records[0].id
    assert editor.filter("ana") == records
    assert editor.filter("222") == []
    assert editor.state is EditorState.CLOSED


def test_empty_query_returns_everything_in_order(store):
    for name in ("Ana", "Bruno", "Carla"):
        store.patients.add({"name": name, "cpf": name})

    assert filter_records(store.patients.list(), "", PATIENT_EDITOR.search_fields) == store.patients.list()
    assert [p.name for p in _patient_editor(store).filter("")] == ["Carla", "Bruno", "Ana"]


def test_filter_is_case_insensitive_over_configured_fields(store):
    store.doctors.add({"name": "Dr. Lima", "crm": "SP123", "specialty": "Cardiologista"})
    store.doctors.add({"name": "Dra. Souza", "crm": "RJ999", "specialty": "Pediatra", "email": "lima@x.com"})
    editor = RecordEditor(store.doctors, DOCTOR_EDITOR)

    assert [d.name for d in editor.filter("CARDIO")] == ["Dr. Lima"]
    assert [d.name for d in editor.filter("sp1")] == ["Dr. Lima"]
    # email is not a search field
    assert [d.name for d in editor.filter("lima")] == ["Dr. Lima"]


def test_hospital_search_by_cnpj(store):
    store.hospitals.add({"name": "Hospital Central", "cnpj": "12.345.678/0001-90"})
    store.hospitals.add({"name": "Hospital Norte", "cnpj": "98.765.432/0001-10"})
    editor = RecordEditor(store.hospitals, HOSPITAL_EDITOR)

    assert [h.name for h in editor.filter("0001-90")] == ["Hospital Central"]


def test_required_fields_per_entity(store):
    patients = _patient_editor(store)
    doctors = RecordEditor(store.doctors, DOCTOR_EDITOR)
    hospitals = RecordEditor(store.hospitals, HOSPITAL_EDITOR)

    assert patients.validate_for_submit({"name": "Ana", "cpf": "1"})
    assert not patients.validate_for_submit({"name": "Ana"})
    assert patients.missing_fields({"name": "  ", "cpf": ""}) == ["name", "cpf"]
    assert doctors.missing_fields({"name": "Dr. Lima", "crm": "SP123"}) == ["specialty"]
    assert hospitals.validate_for_submit({"name": "Central", "cnpj": "1"})


def test_rejected_submit_changes_nothing(store):
    editor = _patient_editor(store)
    editor.open_new()
    editor.update_draft(name="Ana Silva")

    result = editor.submit()

    assert not result.accepted
    assert result.reason == "missing_fields"
    assert result.missing_fields == ["cpf"]
    assert store.patients.list() == []
    assert editor.state is EditorState.CREATING
    assert editor.draft["name"] == "Ana Silva"


def test_edit_doctor_keeps_id_and_position():
    doctors = EntityCollection(
        Doctor,
        [
            Doctor(id="d0", name="Dra. Souza", crm="RJ999", specialty="Pediatra"),
            Doctor(id="d1", name="Dr. Lima", crm="SP123", specialty="Clínico Geral"),
            Doctor(id="d2", name="Dr. Alves", crm="MG555", specialty="Ortopedista"),
        ],
    )
    editor = RecordEditor(doctors, DOCTOR_EDITOR)

    editor.start_edit(doctors.get("d1"))
    assert editor.state is EditorState.EDITING
    assert editor.editing_id == "d1"
    editor.update_draft(specialty="Cardiologista")
    result = editor.submit()

    assert result.accepted
    records = doctors.list()
    assert [d.id for d in records] == ["d0", "d1", "d2"]
    assert [d for d in records if d.id == "d1"] == [
        Doctor(id="d1", name="Dr. Lima", crm="SP123", specialty="Cardiologista")
    ]
    assert editor.state is EditorState.CLOSED


def test_cancel_restores_patient_defaults(store):
    record = store.patients.add({"name": "Ana", "cpf": "1", "status": PaymentStatus.PAID, "amount": 90})
    editor = _patient_editor(store)
    editor.start_edit(record)

    editor.cancel_edit()

    assert editor.state is EditorState.CLOSED
    assert editor.editing_id is None
    assert editor.draft == {"status": PaymentStatus.PENDING, "amount": 0}
    assert store.patients.get(record.id) == record


def test_open_new_discards_previous_draft(store):
    record = store.patients.add({"name": "Ana", "cpf": "1"})
    editor = _patient_editor(store)
    editor.start_edit(record)

    draft = editor.open_new()

    assert editor.state is EditorState.CREATING
    assert editor.editing_id is None
    assert "name" not in draft


def test_submit_while_closed_is_rejected(store):
    editor = _patient_editor(store)
    editor.update_draft(name="Ana", cpf="1")

    result = editor.submit()

    assert not result.accepted
    assert result.reason == "not_open"
    assert store.patients.list() == []


def test_edit_of_deleted_record_is_a_noop(store):
    record = store.patients.add({"name": "Ana", "cpf": "1"})
    editor = _patient_editor(store)
    editor.start_edit(record)
    store.patients.delete(record.id)

    result = editor.submit()

    assert not result.accepted
    assert result.reason == "not_found"
    assert store.patients.list() == []
    assert editor.state is EditorState.CLOSED


def test_delete_closes_editor_on_that_record(store):
    record = store.patients.add({"name": "Ana", "cpf": "1"})
    editor = _patient_editor(store)
    editor.start_edit(record)

    assert editor.delete(record.id)
    assert editor.state is EditorState.CLOSED
    assert editor.delete(record.id) is False


def test_whitespace_is_part_of_the_query():
    records = [
        Patient(id="p1", name="Ana", cpf="1"),
        Patient(id="p2", name="Ana Silva", cpf="2"),
    ]

    assert [p.id for p in filter_records(records, " ", PATIENT_EDITOR.search_fields)] == ["p2"]
    assert filter_records([Patient(id="p3", name="Silva", cpf="3")], "silva ", PATIENT_EDITOR.search_fields) == []
