"""
Schémas Pydantic pour le personnel et les rôles.
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, field_validator

from schooldesk.schemas.common import InputModel, empty_to_none, not_blank


class StaffRoleCreate(InputModel):
    role_name: str

    @field_validator("role_name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return not_blank(v)


class StaffRoleResponse(BaseModel):
    id: int
    role_name: str

    model_config = {"from_attributes": True}


class StaffWrite(InputModel):
    """
    Corps de POST /staff et PUT /staff/{id}.
    Le PUT remplace la ligne entière : un champ optionnel absent est remis à null.
    """
    name: str
    role_id: Optional[int] = None
    phone: Optional[str] = None
    dob: Optional[dt.date] = None
    gender: Optional[str] = None
    address: Optional[str] = None
    hire_date: Optional[dt.date] = None
    qualifications: Optional[str] = None

    @field_validator("dob", "hire_date", mode="before")
    @classmethod
    def blank_date_is_none(cls, v):
        return empty_to_none(v)

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        return not_blank(v)


class StaffResponse(BaseModel):
    id: int
    name: str
    role_id: Optional[int]
    phone: Optional[str]
    dob: Optional[dt.date]
    gender: Optional[str]
    address: Optional[str]
    hire_date: Optional[dt.date]
    qualifications: Optional[str]
    status: str
    role_name: Optional[str] = None
