"""
Tests de l'initialisation du schéma et des rôles par défaut.
"""

from sqlalchemy import func, inspect, select

import pytest

from schooldesk.init_db import DEFAULT_ROLES, init_db, reset_schema, seed_staff_roles
from schooldesk.models.school_class import SchoolClass
from schooldesk.models.staff import StaffRole
from schooldesk.schemas.staff import StaffRoleCreate
from schooldesk.services import staff_service


def count_roles(db) -> int:
    return db.execute(select(func.count()).select_from(StaffRole)).scalar()


def test_schema_contient_les_neuf_tables(engine):
    tables = set(inspect(engine).get_table_names())
    assert tables == {
        "staff_roles", "classes", "sections", "staff", "bus_routes",
        "bus_stops", "students", "fee_structures", "fees",
    }


def test_roles_par_defaut_inseres(db):
    names = set(db.execute(select(StaffRole.role_name)).scalars().all())
    assert names == set(DEFAULT_ROLES)


def test_seed_idempotent(db):
    """Relancer l'insertion des rôles ne crée aucun doublon."""
    before = count_roles(db)
    assert seed_staff_roles(db) == 0
    assert count_roles(db) == before


def test_seed_complete_les_roles_manquants(db):
    db.query(StaffRole).filter(StaffRole.role_name == "Driver").delete()
    db.commit()
    assert seed_staff_roles(db) == 1
    assert count_roles(db) == len(DEFAULT_ROLES)


def test_creation_explicite_d_un_role_existant_refusee(db):
    """La même contrainte d'unicité s'applique à la création via l'API."""
    before = count_roles(db)
    with pytest.raises(ValueError, match="existe déjà"):
        staff_service.create_role(db, StaffRoleCreate(role_name="Teacher"))
    assert count_roles(db) == before


def test_roles_extensibles(db):
    staff_service.create_role(db, StaffRoleCreate(role_name="Librarian"))
    assert count_roles(db) == len(DEFAULT_ROLES) + 1
    # les rôles ajoutés survivent à une nouvelle initialisation non destructive
    assert seed_staff_roles(db) == 0


def test_reset_schema_efface_les_donnees(engine, db):
    db.add(SchoolClass(name="Grade 5"))
    db.commit()
    db.close()

    reset_schema(engine)

    assert db.execute(select(func.count()).select_from(SchoolClass)).scalar() == 0
    assert count_roles(db) == 0


def test_init_db_sans_reset_conserve_les_donnees(engine, db):
    db.add(SchoolClass(name="Grade 5"))
    db.commit()
    db.close()

    init_db(engine, reset=False)

    assert db.execute(select(func.count()).select_from(SchoolClass)).scalar() == 1
    assert count_roles(db) == len(DEFAULT_ROLES)


def test_init_db_avec_reset_reinsere_les_roles(engine, db):
    staff_service.create_role(db, StaffRoleCreate(role_name="Librarian"))
    db.close()

    init_db(engine, reset=True)

    names = set(db.execute(select(StaffRole.role_name)).scalars().all())
    assert names == set(DEFAULT_ROLES)
