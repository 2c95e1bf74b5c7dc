"""
Enveloppes de réponse communes à toutes les ressources.

Création → {"id": ...}, modification/suppression/archivage → {"changes": ...},
listes → {"data": [...]}.
"""

from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class InputModel(BaseModel):
    """Base des corps de requête : les champs inconnus sont rejetés avant d'atteindre la base."""
    model_config = ConfigDict(extra="forbid")


class CreatedResponse(BaseModel):
    id: int


class ChangesResponse(BaseModel):
    """Nombre de lignes affectées ; 0 signifie que la clé n'existe pas (ce n'est pas une erreur)."""
    changes: int


class DataResponse(BaseModel, Generic[T]):
    data: List[T]


def not_blank(v: str) -> str:
    """Refuse une valeur vide ou composée d'espaces ; la valeur acceptée est conservée telle quelle."""
    if not v.strip():
        raise ValueError("Le champ ne peut pas être vide.")
    return v


def empty_to_none(v):
    """Un champ date laissé vide dans un formulaire HTML arrive en "" : traité comme absent."""
    if isinstance(v, str) and not v.strip():
        return None
    return v
