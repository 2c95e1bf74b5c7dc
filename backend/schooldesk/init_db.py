"""
Initialisation du schéma et des rôles de base.

Jamais appelé implicitement à l'import : main.py le déclenche au démarrage selon
INIT_DB_ON_STARTUP / RESET_DB_ON_STARTUP, ou manuellement :

    python -m schooldesk.init_db            # crée les tables manquantes + rôles
    python -m schooldesk.init_db --reset    # DROP + CREATE de toutes les tables (destructif)
"""

import argparse
import logging

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

import schooldesk.models  # noqa: F401 — enregistre toutes les tables dans Base.metadata
from schooldesk.database import Base, engine as default_engine
from schooldesk.models.staff import StaffRole

logger = logging.getLogger(__name__)

DEFAULT_ROLES = ("Teacher", "Admin", "Principal", "Driver")


def reset_schema(engine: Engine) -> None:
    """Supprime puis recrée toutes les tables. Toutes les données sont perdues."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    logger.warning("Schéma réinitialisé : toutes les tables ont été recréées.")


def create_schema(engine: Engine) -> None:
    """Crée uniquement les tables absentes."""
    Base.metadata.create_all(bind=engine)


def seed_staff_roles(db: Session) -> int:
    """
    Insère les rôles par défaut absents (insert-if-absent).
    Relancer l'initialisation ne crée jamais de doublon. Retourne le nombre de rôles insérés.
    """
    existing = set(db.execute(select(StaffRole.role_name)).scalars().all())

    to_insert = [
        {"role_name": name}
        for name in DEFAULT_ROLES
        if name not in existing
    ]

    if to_insert:
        db.bulk_insert_mappings(StaffRole, to_insert)
        db.commit()

    logger.info("Rôles par défaut : %d inséré(s), %d déjà présent(s)", len(to_insert), len(existing))
    return len(to_insert)


def init_db(engine: Engine = default_engine, reset: bool = False) -> None:
    """Prépare la base : (re)création du schéma puis rôles par défaut."""
    if reset:
        reset_schema(engine)
    else:
        create_schema(engine)

    db = sessionmaker(bind=engine)()
    try:
        seed_staff_roles(db)
    finally:
        db.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Initialise la base SchoolDesk.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="supprime et recrée toutes les tables (destructif)",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    init_db(reset=args.reset)


if __name__ == "__main__":
    main()
