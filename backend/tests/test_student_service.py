"""
Tests du service des élèves : listes active/archivée, remplacement, archivage, frais.
"""

from datetime import date

import pytest
from pydantic import ValidationError
from sqlalchemy import func, select

from schooldesk.models.student import Student
from schooldesk.schemas.fee import FeeWrite
from schooldesk.schemas.school_class import ClassCreate, SectionCreate
from schooldesk.schemas.student import StudentWrite
from schooldesk.schemas.transport import BusRouteCreate, BusStopCreate
from schooldesk.services import class_service, fee_service, student_service, transport_service


# --- Helpers ---

def make_section(db, class_name="Grade 5", section_name="A") -> int:
    class_id = class_service.create_class(db, ClassCreate(name=class_name))
    return class_service.create_section(db, SectionCreate(class_id=class_id, section_name=section_name))


def full_student(section_id=None, bus_stop_id=None, **overrides) -> StudentWrite:
    fields = dict(
        name="Jane",
        section_id=section_id,
        dob=date(2015, 3, 2),
        gender="F",
        phone="555-0100",
        parent_name="John Doe",
        parent_phone="555-0101",
        address="1 School Street",
        bus_stop_id=bus_stop_id,
    )
    fields.update(overrides)
    return StudentWrite(**fields)


# --- Validation des schémas ---

def test_student_nom_obligatoire():
    with pytest.raises(ValidationError):
        StudentWrite(section_id=1)


def test_student_nom_vide_rejete():
    with pytest.raises(ValidationError):
        StudentWrite(name="  ")


def test_student_statut_non_modifiable_via_le_corps():
    with pytest.raises(ValidationError):
        StudentWrite(name="Jane", status="Left")


# --- Création et listes ---

def test_create_student_actif_avec_libelle_de_classe(db):
    section_id = make_section(db)
    student_id = student_service.create_student(db, StudentWrite(name="Jane", section_id=section_id))

    students = student_service.get_students(db)

    assert len(students) == 1
    assert students[0].id == student_id
    assert students[0].status == "Active"
    assert students[0].class_name == "Grade 5 A"


def test_aller_retour_tous_les_champs(db):
    section_id = make_section(db)
    route_id = transport_service.create_route(db, BusRouteCreate(route_name="North"))
    stop_id = transport_service.create_stop(db, BusStopCreate(bus_route_id=route_id, stop_name="Mill Road", fee_amount=20))
    data = full_student(section_id=section_id, bus_stop_id=stop_id)

    student_service.create_student(db, data)
    row = student_service.get_students(db)[0]

    for field, value in data.model_dump().items():
        assert getattr(row, field) == value
    assert row.class_name == "Grade 5 A"


def test_eleve_sans_section_a_un_libelle_null(db):
    student_service.create_student(db, StudentWrite(name="Jane"))
    assert student_service.get_students(db)[0].class_name is None


def test_create_student_section_inexistante(db):
    with pytest.raises(ValueError, match="introuvable"):
        student_service.create_student(db, StudentWrite(name="Jane", section_id=999))
    assert student_service.get_students(db) == []


# --- Mise à jour ---

def test_update_student_remplacement_complet(db):
    student_id = student_service.create_student(db, full_student())

    changes = student_service.update_student(db, student_id, StudentWrite(name="Jane Smith"))

    assert changes == 1
    row = student_service.get_students(db)[0]
    assert row.name == "Jane Smith"
    assert row.phone is None  # champ absent → null
    assert row.status == "Active"


def test_update_student_inexistant_retourne_zero(db):
    assert student_service.update_student(db, 999, StudentWrite(name="Ghost")) == 0


def test_update_student_ne_desarchive_pas(db):
    student_id = student_service.create_student(db, StudentWrite(name="Jane"))
    student_service.archive_student(db, student_id)
    student_service.update_student(db, student_id, StudentWrite(name="Jane B."))
    assert student_service.get_students(db, "Left")[0].name == "Jane B."


# --- Archivage ---

def test_archive_student(db):
    student_id = student_service.create_student(db, StudentWrite(name="Jane"))

    assert student_service.archive_student(db, student_id) == 1

    assert student_service.get_students(db, "Active") == []
    archived = student_service.get_students(db, "Left")
    assert [s.id for s in archived] == [student_id]
    assert archived[0].status == "Left"


def test_archive_idempotent(db):
    student_id = student_service.create_student(db, StudentWrite(name="Jane"))
    student_service.archive_student(db, student_id)

    assert student_service.archive_student(db, student_id) == 1
    assert student_service.get_students(db, "Left")[0].status == "Left"


def test_archive_inexistant_retourne_zero(db):
    assert student_service.archive_student(db, 999) == 0


def test_listes_active_et_archivee_partitionnent_la_table(db):
    ids = [student_service.create_student(db, StudentWrite(name=f"Student {i}")) for i in range(5)]
    student_service.archive_student(db, ids[1])
    student_service.archive_student(db, ids[3])

    active = {s.id for s in student_service.get_students(db, "Active")}
    archived = {s.id for s in student_service.get_students(db, "Left")}
    total = db.execute(select(func.count()).select_from(Student)).scalar()

    assert active.isdisjoint(archived)
    assert len(active | archived) == total
    assert active | archived == set(ids)


# --- Frais d'un élève ---

def test_get_student_fees_tries_par_echeance(db):
    student_id = student_service.create_student(db, StudentWrite(name="Jane"))
    other_id = student_service.create_student(db, StudentWrite(name="Bob"))
    fee_service.create_fee(db, FeeWrite(student_id=student_id, amount=100, status="Due", due_date=date(2026, 12, 1)))
    fee_service.create_fee(db, FeeWrite(student_id=student_id, amount=50, status="Paid", due_date=date(2026, 9, 1)))
    fee_service.create_fee(db, FeeWrite(student_id=other_id, amount=75, status="Due"))

    fees = student_service.get_student_fees(db, student_id)

    assert [f.amount for f in fees] == [50, 100]
    assert all(f.student_id == student_id for f in fees)


def test_get_student_fees_eleve_sans_frais(db):
    assert student_service.get_student_fees(db, 999) == []


def test_valeurs_conservees_telles_que_saisies(db):
    student_service.create_student(db, StudentWrite(name=" Jane ", phone=" 555 "))
    row = student_service.get_students(db)[0]
    assert (row.name, row.phone) == (" Jane ", " 555 ")


def test_date_vide_traitee_comme_absente():
    assert StudentWrite(name="Jane", dob="").dob is None
