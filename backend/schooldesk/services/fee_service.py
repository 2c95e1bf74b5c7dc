"""
Service métier pour la facturation.

Les structures de frais décrivent un montant attendu par classe et type de frais.
Les frais sont des charges saisies élève par élève : aucune structure ne crée,
ne modifie ni ne supprime de frais existants.
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from schooldesk.models.fee import Fee, FeeStructure
from schooldesk.models.school_class import SchoolClass
from schooldesk.schemas.fee import FeeStructureCreate, FeeStructureResponse, FeeWrite
from schooldesk.services.integrity import execute_write, insert_row

logger = logging.getLogger(__name__)


# --- Structures de frais ---

def get_fee_structures(db: Session) -> list[FeeStructureResponse]:
    """Jointure externe : une structure générale (class_id null) est listée avec class_name null."""
    rows = db.execute(
        select(FeeStructure, SchoolClass.name)
        .outerjoin(SchoolClass, FeeStructure.class_id == SchoolClass.id)
        .order_by(FeeStructure.id)
    ).all()
    return [
        FeeStructureResponse(
            id=structure.id,
            class_id=structure.class_id,
            fee_type=structure.fee_type,
            amount=structure.amount,
            class_name=class_name,
        )
        for structure, class_name in rows
    ]


def create_fee_structure(db: Session, data: FeeStructureCreate) -> int:
    structure_id = insert_row(
        db,
        FeeStructure(class_id=data.class_id, fee_type=data.fee_type, amount=data.amount),
        duplicate_message="Cette structure de frais existe déjà.",
        reference_message=f"Classe {data.class_id} introuvable.",
    )
    logger.info("Structure de frais créée : %s = %s (classe %s)", data.fee_type, data.amount, data.class_id)
    return structure_id


def delete_fee_structure(db: Session, structure_id: int) -> int:
    changes = execute_write(
        db,
        delete(FeeStructure).where(FeeStructure.id == structure_id),
        "Impossible de supprimer cette structure de frais.",
    )
    logger.info("Structure de frais %s supprimée (%d ligne(s))", structure_id, changes)
    return changes


# --- Frais par élève ---

def create_fee(db: Session, data: FeeWrite) -> int:
    fee_id = insert_row(
        db,
        Fee(**data.model_dump()),
        duplicate_message="Ce frais existe déjà.",
        reference_message=f"Élève {data.student_id} introuvable.",
    )
    logger.info("Frais créé pour l'élève %s : %s (%s)", data.student_id, data.amount, fee_id)
    return fee_id


def update_fee(db: Session, fee_id: int, data: FeeWrite) -> int:
    """Remplacement complet d'un frais (ex. passage Due → Paid). Retourne 0 si absent."""
    changes = execute_write(
        db,
        update(Fee).where(Fee.id == fee_id).values(**data.model_dump()),
        f"Élève {data.student_id} introuvable.",
    )
    logger.info("Frais %s mis à jour (%d ligne(s))", fee_id, changes)
    return changes


def delete_fee(db: Session, fee_id: int) -> int:
    changes = execute_write(
        db,
        delete(Fee).where(Fee.id == fee_id),
        "Impossible de supprimer ce frais.",
    )
    logger.info("Frais %s supprimé (%d ligne(s))", fee_id, changes)
    return changes
