"""
Schémas Pydantic pour les élèves.
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, field_validator

from schooldesk.schemas.common import InputModel, empty_to_none, not_blank


class StudentWrite(InputModel):
    """
    Corps de POST /students et PUT /students/{id}.
    Le PUT remplace la ligne entière ; le statut n'est modifiable que via l'archivage.
    """
    name: str
    section_id: Optional[int] = None
    dob: Optional[dt.date] = None
    gender: Optional[str] = None
    phone: Optional[str] = None
    parent_name: Optional[str] = None
    parent_phone: Optional[str] = None
    address: Optional[str] = None
    bus_stop_id: Optional[int] = None

    @field_validator("dob", mode="before")
    @classmethod
    def blank_date_is_none(cls, v):
        return empty_to_none(v)

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        return not_blank(v)


class StudentResponse(BaseModel):
    """Élève avec le libellé "<Classe> <Section>" dérivé par jointure (null sans section)."""
    id: int
    name: str
    section_id: Optional[int]
    dob: Optional[dt.date]
    gender: Optional[str]
    phone: Optional[str]
    parent_name: Optional[str]
    parent_phone: Optional[str]
    address: Optional[str]
    bus_stop_id: Optional[int]
    status: str
    class_name: Optional[str] = None
