"""
Document de paramètres de l'interface : un JSON opaque stocké à côté de la base.

Lecture et remplacement intégral uniquement (pas de fusion). L'écriture passe par
un fichier temporaire renommé sur la cible, pour qu'un lecteur concurrent voie
soit l'ancien document, soit le nouveau.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional

from schooldesk import config

logger = logging.getLogger(__name__)


class SettingsStorageError(Exception):
    """Le document de paramètres n'a pas pu être lu ou écrit."""


def _settings_path(path: Optional[str]) -> Path:
    return Path(path or config.settings.SETTINGS_FILE)


def load_settings(path: Optional[str] = None) -> Any:
    """Retourne le document complet. Lève SettingsStorageError si absent, illisible ou invalide."""
    target = _settings_path(path)
    try:
        with target.open(encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as exc:
        logger.error("Lecture des paramètres impossible (%s) : %s", target, exc)
        raise SettingsStorageError(str(exc)) from exc


def replace_settings(document: Any, path: Optional[str] = None) -> None:
    """Écrase le document entier (écriture dans un temporaire puis os.replace)."""
    target = _settings_path(path)
    try:
        fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, target)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
    except OSError as exc:
        logger.error("Écriture des paramètres impossible (%s) : %s", target, exc)
        raise SettingsStorageError(str(exc)) from exc
    logger.info("Paramètres remplacés (%s)", target)
