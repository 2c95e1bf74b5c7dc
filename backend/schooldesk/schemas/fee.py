"""
Schémas Pydantic pour les structures de frais et les frais matérialisés.
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, field_validator

from schooldesk.schemas.common import InputModel, empty_to_none, not_blank


class FeeStructureCreate(InputModel):
    class_id: Optional[int] = None  # null = s'applique à toutes les classes
    fee_type: str
    amount: float

    @field_validator("fee_type")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return not_blank(v)


class FeeStructureResponse(BaseModel):
    id: int
    class_id: Optional[int]
    fee_type: str
    amount: float
    class_name: Optional[str] = None


class FeeWrite(InputModel):
    """Corps de POST /fees et PUT /fees/{id} (remplacement complet)."""
    student_id: int
    amount: float
    status: str
    due_date: Optional[dt.date] = None
    fee_type: Optional[str] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def blank_date_is_none(cls, v):
        return empty_to_none(v)

    @field_validator("status")
    @classmethod
    def status_not_empty(cls, v: str) -> str:
        return not_blank(v)


class FeeResponse(BaseModel):
    id: int
    student_id: int
    amount: float
    status: str
    due_date: Optional[dt.date]
    fee_type: Optional[str]

    model_config = {"from_attributes": True}
