"""
Router pour les rôles du personnel.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from schooldesk.database import get_db
from schooldesk.schemas.common import ChangesResponse, CreatedResponse, DataResponse
from schooldesk.schemas.staff import StaffRoleCreate, StaffRoleResponse
from schooldesk.services import staff_service

router = APIRouter(prefix="/api/staff-roles", tags=["Rôles"])


@router.get("", response_model=DataResponse[StaffRoleResponse], summary="Lister les rôles")
def list_roles(db: Session = Depends(get_db)):
    return {"data": staff_service.get_roles(db)}


@router.post("", response_model=CreatedResponse, status_code=201, summary="Créer un rôle")
def create_role(data: StaffRoleCreate, db: Session = Depends(get_db)):
    """Crée un rôle. Un nom déjà existant → 409."""
    try:
        return {"id": staff_service.create_role(db, data)}
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.delete("/{role_id}", response_model=ChangesResponse, summary="Supprimer un rôle")
def delete_role(role_id: int, db: Session = Depends(get_db)):
    try:
        return {"changes": staff_service.delete_role(db, role_id)}
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
