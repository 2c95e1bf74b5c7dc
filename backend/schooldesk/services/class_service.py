"""
Service métier pour les classes et leurs sections.
Suppressions physiques ; une classe qui possède encore des sections
ou des structures de frais ne peut pas être supprimée (RESTRICT).
"""

import logging
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from schooldesk.models.school_class import SchoolClass, Section
from schooldesk.models.staff import Staff
from schooldesk.schemas.school_class import ClassCreate, ClassResponse, SectionCreate, SectionResponse
from schooldesk.services.integrity import execute_write, insert_row

logger = logging.getLogger(__name__)


def get_classes(db: Session) -> list[ClassResponse]:
    classes = db.execute(select(SchoolClass).order_by(SchoolClass.id)).scalars().all()
    return [ClassResponse.model_validate(c) for c in classes]


def create_class(db: Session, data: ClassCreate) -> int:
    """
    Crée une nouvelle classe.
    Lève une ValueError si le nom existe déjà.
    """
    class_id = insert_row(
        db,
        SchoolClass(name=data.name),
        duplicate_message=f"Une classe avec le nom '{data.name}' existe déjà.",
        reference_message="Classe invalide.",
    )
    logger.info("Classe créée : %s (%s)", data.name, class_id)
    return class_id


def delete_class(db: Session, class_id: int) -> int:
    changes = execute_write(
        db,
        delete(SchoolClass).where(SchoolClass.id == class_id),
        "Impossible de supprimer cette classe : des sections ou des structures de frais y sont rattachées.",
    )
    logger.info("Classe %s supprimée (%d ligne(s))", class_id, changes)
    return changes


def get_sections(db: Session, class_id: Optional[int] = None) -> list[SectionResponse]:
    """Retourne les sections (éventuellement d'une seule classe) avec nom de classe et de titulaire."""
    query = (
        select(Section, SchoolClass.name, Staff.name)
        .join(SchoolClass, Section.class_id == SchoolClass.id)
        .outerjoin(Staff, Section.teacher_id == Staff.id)
        .order_by(Section.id)
    )
    if class_id is not None:
        query = query.where(Section.class_id == class_id)

    return [
        SectionResponse(
            id=section.id,
            class_id=section.class_id,
            section_name=section.section_name,
            teacher_id=section.teacher_id,
            class_name=class_name,
            teacher_name=teacher_name,
        )
        for section, class_name, teacher_name in db.execute(query).all()
    ]


def create_section(db: Session, data: SectionCreate) -> int:
    """
    Crée une section.
    Lève une ValueError si (classe, nom) existe déjà ou si la classe/l'enseignant est introuvable.
    """
    section_id = insert_row(
        db,
        Section(class_id=data.class_id, section_name=data.section_name, teacher_id=data.teacher_id),
        duplicate_message=f"La section '{data.section_name}' existe déjà pour cette classe.",
        reference_message="Classe ou enseignant introuvable.",
    )
    logger.info("Section créée : %s (classe %s, id %s)", data.section_name, data.class_id, section_id)
    return section_id


def delete_section(db: Session, section_id: int) -> int:
    """Supprime une section ; les élèves rattachés perdent leur section (SET NULL)."""
    changes = execute_write(
        db,
        delete(Section).where(Section.id == section_id),
        "Impossible de supprimer cette section.",
    )
    logger.info("Section %s supprimée (%d ligne(s))", section_id, changes)
    return changes
