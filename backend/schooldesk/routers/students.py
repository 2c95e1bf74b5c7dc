"""
Router pour les élèves.
GET  /api/students               — élèves actifs
GET  /api/students/archived      — élèves archivés
POST /api/students               — création
PUT  /api/students/{id}          — remplacement complet
PUT  /api/students/{id}/archive  — archivage (status → Left)
GET  /api/students/{id}/fees     — frais de l'élève
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from schooldesk.database import get_db
from schooldesk.models.status import ACTIVE, LEFT
from schooldesk.schemas.common import ChangesResponse, CreatedResponse, DataResponse
from schooldesk.schemas.fee import FeeResponse
from schooldesk.schemas.student import StudentResponse, StudentWrite
from schooldesk.services import student_service

router = APIRouter(prefix="/api/students", tags=["Élèves"])


@router.get("", response_model=DataResponse[StudentResponse], summary="Lister les élèves actifs")
def list_active_students(db: Session = Depends(get_db)):
    """Retourne les élèves actifs avec leur libellé de classe ("<Classe> <Section>")."""
    return {"data": student_service.get_students(db, ACTIVE)}


@router.get("/archived", response_model=DataResponse[StudentResponse], summary="Lister les élèves archivés")
def list_archived_students(db: Session = Depends(get_db)):
    return {"data": student_service.get_students(db, LEFT)}


@router.post("", response_model=CreatedResponse, status_code=201, summary="Créer un élève")
def create_student(data: StudentWrite, db: Session = Depends(get_db)):
    try:
        return {"id": student_service.create_student(db, data)}
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.put("/{student_id}", response_model=ChangesResponse, summary="Modifier un élève")
def update_student(student_id: int, data: StudentWrite, db: Session = Depends(get_db)):
    """Remplace tous les champs modifiables. changes = 0 si l'élève n'existe pas."""
    try:
        return {"changes": student_service.update_student(db, student_id, data)}
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.put("/{student_id}/archive", response_model=ChangesResponse, summary="Archiver un élève")
def archive_student(student_id: int, db: Session = Depends(get_db)):
    """
    Archive un élève (suppression logique — status → Left).
    Les données sont conservées et restent visibles via /archived.
    """
    try:
        return {"changes": student_service.archive_student(db, student_id)}
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/{student_id}/fees", response_model=DataResponse[FeeResponse], summary="Frais d'un élève")
def list_student_fees(student_id: int, db: Session = Depends(get_db)):
    return {"data": student_service.get_student_fees(db, student_id)}
