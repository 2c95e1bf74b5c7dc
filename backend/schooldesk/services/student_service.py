"""
Service métier pour les élèves.

Listes active/archivée, création, remplacement complet, archivage (status → Left)
et consultation des frais d'un élève. Aucun élève n'est supprimé physiquement.
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from schooldesk.models.fee import Fee
from schooldesk.models.school_class import SchoolClass, Section
from schooldesk.models.status import ACTIVE, LEFT
from schooldesk.models.student import Student
from schooldesk.schemas.fee import FeeResponse
from schooldesk.schemas.student import StudentResponse, StudentWrite
from schooldesk.services.integrity import execute_write, insert_row

logger = logging.getLogger(__name__)

REFERENCE_MESSAGE = "Section ou arrêt de bus introuvable."


def get_students(db: Session, status: str = ACTIVE) -> list[StudentResponse]:
    """
    Retourne les élèves d'un statut donné.
    class_name = "<Classe> <Section>" via sections → classes ; null si l'élève n'a pas de section.
    """
    class_name = (SchoolClass.name + " " + Section.section_name).label("class_name")
    rows = db.execute(
        select(Student, class_name)
        .outerjoin(Section, Student.section_id == Section.id)
        .outerjoin(SchoolClass, Section.class_id == SchoolClass.id)
        .where(Student.status == status)
        .order_by(Student.id)
    ).all()
    return [_to_response(student, label) for student, label in rows]


def create_student(db: Session, data: StudentWrite) -> int:
    """Crée un élève actif. Lève une ValueError si la section ou l'arrêt n'existe pas."""
    student_id = insert_row(
        db,
        Student(**data.model_dump(), status=ACTIVE),
        duplicate_message="Cet élève existe déjà.",
        reference_message=REFERENCE_MESSAGE,
    )
    logger.info("Élève créé : %s (%s)", data.name, student_id)
    return student_id


def update_student(db: Session, student_id: int, data: StudentWrite) -> int:
    """
    Remplace tous les champs modifiables d'un élève (les champs absents repassent à null).
    Le statut n'est pas touché. Retourne 0 si l'élève n'existe pas.
    """
    changes = execute_write(
        db,
        update(Student).where(Student.id == student_id).values(**data.model_dump()),
        REFERENCE_MESSAGE,
    )
    logger.info("Élève %s mis à jour (%d ligne(s))", student_id, changes)
    return changes


def archive_student(db: Session, student_id: int) -> int:
    """
    Archive un élève (suppression logique).
    Idempotent : archiver un élève déjà archivé retourne toujours 1.
    """
    changes = execute_write(
        db,
        update(Student).where(Student.id == student_id).values(status=LEFT),
        "Archivage impossible.",
    )
    logger.info("Élève %s archivé (%d ligne(s))", student_id, changes)
    return changes


def get_student_fees(db: Session, student_id: int) -> list[FeeResponse]:
    """Frais matérialisés d'un élève, par échéance puis par ordre de création."""
    fees = db.execute(
        select(Fee)
        .where(Fee.student_id == student_id)
        .order_by(Fee.due_date, Fee.id)
    ).scalars().all()
    return [FeeResponse.model_validate(f) for f in fees]


def _to_response(student: Student, class_name) -> StudentResponse:
    return StudentResponse(
        id=student.id,
        name=student.name,
        section_id=student.section_id,
        dob=student.dob,
        gender=student.gender,
        phone=student.phone,
        parent_name=student.parent_name,
        parent_phone=student.parent_phone,
        address=student.address,
        bus_stop_id=student.bus_stop_id,
        status=student.status,
        class_name=class_name,
    )
