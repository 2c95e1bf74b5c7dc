"""
Configuration partagée pour tous les tests.

- client : dépendance get_db remplacée par un MagicMock (tests de routes, services patchés).
- db / sqlite_client : vraie base SQLite en mémoire, clés étrangères actives,
  pour vérifier les contraintes appliquées par le stockage.
"""

import os

# Avant tout import de schooldesk : pas de fichier school.db ni d'initialisation au démarrage.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("INIT_DB_ON_STARTUP", "false")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from schooldesk.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from schooldesk.init_db import seed_staff_roles  # noqa: E402
from schooldesk.main import app  # noqa: E402


@pytest.fixture
def client():
    """Client HTTP de test avec la BDD mockée."""
    mock_db = MagicMock()
    app.dependency_overrides[get_db] = lambda: mock_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def engine():
    """Moteur SQLite en mémoire partagé par toutes les connexions du test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    """Session sur la base en mémoire, rôles par défaut déjà insérés."""
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    seed_staff_roles(session)
    yield session
    session.close()


@pytest.fixture
def sqlite_client(db):
    """Client HTTP branché sur la vraie base en mémoire."""
    app.dependency_overrides[get_db] = lambda: db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
