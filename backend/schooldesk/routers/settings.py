"""
Router pour le document de paramètres de l'interface (lecture / remplacement intégral).
Le document est un JSON opaque : objet, tableau ou valeur simple.
"""

from typing import Any

from fastapi import APIRouter, Body, HTTPException

from schooldesk.services import settings_service
from schooldesk.services.settings_service import SettingsStorageError

router = APIRouter(prefix="/api/settings", tags=["Paramètres"])


@router.get("", summary="Lire les paramètres")
def get_settings():
    try:
        return settings_service.load_settings()
    except SettingsStorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.put("", summary="Remplacer les paramètres")
def replace_settings(document: Any = Body(...)):
    """Remplace le document entier : aucune fusion avec le contenu précédent."""
    try:
        settings_service.replace_settings(document)
    except SettingsStorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"message": "Settings updated successfully."}
