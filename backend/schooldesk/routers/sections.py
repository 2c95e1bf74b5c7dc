"""
Router pour les sections de classe.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from schooldesk.database import get_db
from schooldesk.schemas.common import ChangesResponse, CreatedResponse, DataResponse
from schooldesk.schemas.school_class import SectionCreate, SectionResponse
from schooldesk.services import class_service

router = APIRouter(prefix="/api/sections", tags=["Sections"])


@router.get("", response_model=DataResponse[SectionResponse], summary="Lister les sections")
def list_sections(class_id: Optional[int] = None, db: Session = Depends(get_db)):
    """Retourne les sections avec class_name et teacher_name, filtrables par classe."""
    return {"data": class_service.get_sections(db, class_id)}


@router.post("", response_model=CreatedResponse, status_code=201, summary="Créer une section")
def create_section(data: SectionCreate, db: Session = Depends(get_db)):
    try:
        return {"id": class_service.create_section(db, data)}
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.delete("/{section_id}", response_model=ChangesResponse, summary="Supprimer une section")
def delete_section(section_id: int, db: Session = Depends(get_db)):
    """Supprime une section. Les élèves rattachés restent, sans section."""
    try:
        return {"changes": class_service.delete_section(db, section_id)}
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
