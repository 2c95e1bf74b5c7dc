"""
Router pour les classes scolaires.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from schooldesk.database import get_db
from schooldesk.schemas.common import ChangesResponse, CreatedResponse, DataResponse
from schooldesk.schemas.school_class import ClassCreate, ClassResponse
from schooldesk.services import class_service

router = APIRouter(prefix="/api/classes", tags=["Classes"])


@router.get("", response_model=DataResponse[ClassResponse], summary="Lister les classes")
def list_classes(db: Session = Depends(get_db)):
    return {"data": class_service.get_classes(db)}


@router.post("", response_model=CreatedResponse, status_code=201, summary="Créer une classe")
def create_class(data: ClassCreate, db: Session = Depends(get_db)):
    """Crée une nouvelle classe scolaire avec un nom unique."""
    try:
        return {"id": class_service.create_class(db, data)}
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.delete("/{class_id}", response_model=ChangesResponse, summary="Supprimer une classe")
def delete_class(class_id: int, db: Session = Depends(get_db)):
    """
    Supprime une classe définitivement.
    Bloqué (409) si des sections ou des structures de frais y sont rattachées.
    """
    try:
        return {"changes": class_service.delete_class(db, class_id)}
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
