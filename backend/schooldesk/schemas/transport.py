"""
Schémas Pydantic pour les lignes de bus et les arrêts.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from schooldesk.schemas.common import InputModel, not_blank


class BusRouteCreate(InputModel):
    route_name: str
    driver_id: Optional[int] = None

    @field_validator("route_name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return not_blank(v)


class BusRouteResponse(BaseModel):
    id: int
    route_name: str
    driver_id: Optional[int]
    driver_name: Optional[str] = None


class BusStopCreate(InputModel):
    bus_route_id: int
    stop_name: str
    fee_amount: float = Field(default=0, ge=0)

    @field_validator("stop_name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return not_blank(v)


class BusStopResponse(BaseModel):
    id: int
    bus_route_id: int
    stop_name: str
    fee_amount: float
    route_name: str
