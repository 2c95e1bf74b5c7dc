"""
Router pour les frais matérialisés par élève.
La liste des frais d'un élève est exposée sous /api/students/{id}/fees.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from schooldesk.database import get_db
from schooldesk.schemas.common import ChangesResponse, CreatedResponse
from schooldesk.schemas.fee import FeeWrite
from schooldesk.services import fee_service

router = APIRouter(prefix="/api/fees", tags=["Frais"])


@router.post("", response_model=CreatedResponse, status_code=201, summary="Saisir un frais")
def create_fee(data: FeeWrite, db: Session = Depends(get_db)):
    try:
        return {"id": fee_service.create_fee(db, data)}
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.put("/{fee_id}", response_model=ChangesResponse, summary="Modifier un frais")
def update_fee(fee_id: int, data: FeeWrite, db: Session = Depends(get_db)):
    try:
        return {"changes": fee_service.update_fee(db, fee_id, data)}
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.delete("/{fee_id}", response_model=ChangesResponse, summary="Supprimer un frais")
def delete_fee(fee_id: int, db: Session = Depends(get_db)):
    try:
        return {"changes": fee_service.delete_fee(db, fee_id)}
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
