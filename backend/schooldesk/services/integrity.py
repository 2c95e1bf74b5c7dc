"""
Écritures communes aux services : une instruction, un commit.

Toute violation d'intégrité (doublon, clé étrangère inexistante, suppression
bloquée par une relation RESTRICT) annule la session et remonte en ValueError,
que les routers traduisent en 409.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    """SQLite : 'FOREIGN KEY constraint failed' ; PostgreSQL : 'violates foreign key constraint'."""
    return "foreign key" in str(exc.orig).lower()


def insert_row(db: Session, row, duplicate_message: str, reference_message: str) -> int:
    """Insère une ligne ORM et retourne la clé attribuée."""
    db.add(row)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        message = reference_message if is_foreign_key_violation(exc) else duplicate_message
        logger.warning("Insertion refusée (%s) : %s", type(row).__name__, exc.orig)
        raise ValueError(message) from exc
    db.refresh(row)
    return row.id


def execute_write(db: Session, statement, conflict_message: str) -> int:
    """Exécute un UPDATE/DELETE et retourne le nombre de lignes affectées (0 = clé absente)."""
    try:
        result = db.execute(statement)
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Écriture refusée : %s", exc.orig)
        raise ValueError(conflict_message) from exc
    return result.rowcount
