"""
Service métier pour le personnel et les rôles.
Le personnel n'est jamais supprimé : il est archivé (status → Left).
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from schooldesk.models.staff import Staff, StaffRole
from schooldesk.models.status import ACTIVE, LEFT
from schooldesk.schemas.staff import StaffResponse, StaffRoleCreate, StaffRoleResponse, StaffWrite
from schooldesk.services.integrity import execute_write, insert_row

logger = logging.getLogger(__name__)


# --- Rôles ---

def get_roles(db: Session) -> list[StaffRoleResponse]:
    roles = db.execute(select(StaffRole).order_by(StaffRole.id)).scalars().all()
    return [StaffRoleResponse.model_validate(r) for r in roles]


def create_role(db: Session, data: StaffRoleCreate) -> int:
    """Crée un rôle. Lève une ValueError si le nom existe déjà."""
    role_id = insert_row(
        db,
        StaffRole(role_name=data.role_name),
        duplicate_message=f"Un rôle avec le nom '{data.role_name}' existe déjà.",
        reference_message="Rôle invalide.",
    )
    logger.info("Rôle créé : %s (%s)", data.role_name, role_id)
    return role_id


def delete_role(db: Session, role_id: int) -> int:
    """Supprime un rôle. Bloqué tant qu'un membre du personnel le porte."""
    changes = execute_write(
        db,
        delete(StaffRole).where(StaffRole.id == role_id),
        "Impossible de supprimer ce rôle : il est attribué à des membres du personnel.",
    )
    logger.info("Rôle %s supprimé (%d ligne(s))", role_id, changes)
    return changes


# --- Personnel ---

def get_staff(db: Session, status: str = ACTIVE) -> list[StaffResponse]:
    """
    Retourne le personnel d'un statut donné avec le nom de son rôle.
    Jointure externe : un membre sans rôle reste listé (role_name null).
    """
    rows = db.execute(
        select(Staff, StaffRole.role_name)
        .outerjoin(StaffRole, Staff.role_id == StaffRole.id)
        .where(Staff.status == status)
        .order_by(Staff.id)
    ).all()
    return [_to_response(staff, role_name) for staff, role_name in rows]


def create_staff(db: Session, data: StaffWrite) -> int:
    staff_id = insert_row(
        db,
        Staff(**data.model_dump(), status=ACTIVE),
        duplicate_message="Ce membre du personnel existe déjà.",
        reference_message=f"Rôle {data.role_id} introuvable.",
    )
    logger.info("Personnel créé : %s (%s)", data.name, staff_id)
    return staff_id


def update_staff(db: Session, staff_id: int, data: StaffWrite) -> int:
    """Remplace tous les champs modifiables. Retourne 0 si le membre n'existe pas."""
    changes = execute_write(
        db,
        update(Staff).where(Staff.id == staff_id).values(**data.model_dump()),
        f"Rôle {data.role_id} introuvable.",
    )
    logger.info("Personnel %s mis à jour (%d ligne(s))", staff_id, changes)
    return changes


def archive_staff(db: Session, staff_id: int) -> int:
    """Passe un membre au statut Left. Idempotent : un membre déjà archivé compte comme affecté."""
    changes = execute_write(
        db,
        update(Staff).where(Staff.id == staff_id).values(status=LEFT),
        "Archivage impossible.",
    )
    logger.info("Personnel %s archivé (%d ligne(s))", staff_id, changes)
    return changes


def _to_response(staff: Staff, role_name) -> StaffResponse:
    return StaffResponse(
        id=staff.id,
        name=staff.name,
        role_id=staff.role_id,
        phone=staff.phone,
        dob=staff.dob,
        gender=staff.gender,
        address=staff.address,
        hire_date=staff.hire_date,
        qualifications=staff.qualifications,
        status=staff.status,
        role_name=role_name,
    )
