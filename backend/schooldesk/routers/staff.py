"""
Router pour le personnel.
Listes active/archivée, création, remplacement complet, archivage.
Aucune suppression physique n'est exposée.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from schooldesk.database import get_db
from schooldesk.models.status import ACTIVE, LEFT
from schooldesk.schemas.common import ChangesResponse, CreatedResponse, DataResponse
from schooldesk.schemas.staff import StaffResponse, StaffWrite
from schooldesk.services import staff_service

router = APIRouter(prefix="/api/staff", tags=["Personnel"])


@router.get("", response_model=DataResponse[StaffResponse], summary="Lister le personnel actif")
def list_active_staff(db: Session = Depends(get_db)):
    return {"data": staff_service.get_staff(db, ACTIVE)}


@router.get("/archived", response_model=DataResponse[StaffResponse], summary="Lister le personnel archivé")
def list_archived_staff(db: Session = Depends(get_db)):
    return {"data": staff_service.get_staff(db, LEFT)}


@router.post("", response_model=CreatedResponse, status_code=201, summary="Créer un membre du personnel")
def create_staff(data: StaffWrite, db: Session = Depends(get_db)):
    try:
        return {"id": staff_service.create_staff(db, data)}
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.put("/{staff_id}", response_model=ChangesResponse, summary="Modifier un membre du personnel")
def update_staff(staff_id: int, data: StaffWrite, db: Session = Depends(get_db)):
    """Remplace tous les champs. changes = 0 si le membre n'existe pas."""
    try:
        return {"changes": staff_service.update_staff(db, staff_id, data)}
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.put("/{staff_id}/archive", response_model=ChangesResponse, summary="Archiver un membre du personnel")
def archive_staff(staff_id: int, db: Session = Depends(get_db)):
    """Suppression logique — status → Left. Idempotent."""
    try:
        return {"changes": staff_service.archive_staff(db, staff_id)}
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
