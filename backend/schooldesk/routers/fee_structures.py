"""
Router pour les structures de frais (montants attendus par classe).
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from schooldesk.database import get_db
from schooldesk.schemas.common import ChangesResponse, CreatedResponse, DataResponse
from schooldesk.schemas.fee import FeeStructureCreate, FeeStructureResponse
from schooldesk.services import fee_service

router = APIRouter(prefix="/api/fee-structures", tags=["Structures de frais"])


@router.get("", response_model=DataResponse[FeeStructureResponse], summary="Lister les structures de frais")
def list_fee_structures(db: Session = Depends(get_db)):
    return {"data": fee_service.get_fee_structures(db)}


@router.post("", response_model=CreatedResponse, status_code=201, summary="Créer une structure de frais")
def create_fee_structure(data: FeeStructureCreate, db: Session = Depends(get_db)):
    """Les frais déjà saisis pour les élèves ne sont pas modifiés."""
    try:
        return {"id": fee_service.create_fee_structure(db, data)}
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.delete("/{structure_id}", response_model=ChangesResponse, summary="Supprimer une structure de frais")
def delete_fee_structure(structure_id: int, db: Session = Depends(get_db)):
    try:
        return {"changes": fee_service.delete_fee_structure(db, structure_id)}
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
