"""
Schémas Pydantic pour les classes et les sections.
"""

from typing import Optional

from pydantic import BaseModel, field_validator

from schooldesk.schemas.common import InputModel, not_blank


class ClassCreate(InputModel):
    name: str

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le nom de la classe ne peut pas être vide.")
        return v


class ClassResponse(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class SectionCreate(InputModel):
    class_id: int
    section_name: str
    teacher_id: Optional[int] = None

    @field_validator("section_name")
    @classmethod
    def section_name_not_empty(cls, v: str) -> str:
        return not_blank(v)


class SectionResponse(BaseModel):
    """Section avec le nom de sa classe et de son titulaire (jointure)."""
    id: int
    class_id: int
    section_name: str
    teacher_id: Optional[int]
    class_name: str
    teacher_name: Optional[str] = None
