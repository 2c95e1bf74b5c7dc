"""
Routers pour le transport scolaire : lignes de bus et arrêts.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from schooldesk.database import get_db
from schooldesk.schemas.common import ChangesResponse, CreatedResponse, DataResponse
from schooldesk.schemas.transport import BusRouteCreate, BusRouteResponse, BusStopCreate, BusStopResponse
from schooldesk.services import transport_service

routes_router = APIRouter(prefix="/api/bus-routes", tags=["Transport"])
stops_router = APIRouter(prefix="/api/bus-stops", tags=["Transport"])


# --- Lignes ---

@routes_router.get("", response_model=DataResponse[BusRouteResponse], summary="Lister les lignes de bus")
def list_routes(db: Session = Depends(get_db)):
    """Retourne les lignes avec le nom du chauffeur."""
    return {"data": transport_service.get_routes(db)}


@routes_router.post("", response_model=CreatedResponse, status_code=201, summary="Créer une ligne de bus")
def create_route(data: BusRouteCreate, db: Session = Depends(get_db)):
    try:
        return {"id": transport_service.create_route(db, data)}
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))


@routes_router.delete("/{route_id}", response_model=ChangesResponse, summary="Supprimer une ligne de bus")
def delete_route(route_id: int, db: Session = Depends(get_db)):
    """Bloqué (409) tant que la ligne possède des arrêts."""
    try:
        return {"changes": transport_service.delete_route(db, route_id)}
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))


# --- Arrêts ---

@stops_router.get("", response_model=DataResponse[BusStopResponse], summary="Lister les arrêts")
def list_stops(bus_route_id: Optional[int] = None, db: Session = Depends(get_db)):
    return {"data": transport_service.get_stops(db, bus_route_id)}


@stops_router.post("", response_model=CreatedResponse, status_code=201, summary="Créer un arrêt")
def create_stop(data: BusStopCreate, db: Session = Depends(get_db)):
    try:
        return {"id": transport_service.create_stop(db, data)}
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))


@stops_router.delete("/{stop_id}", response_model=ChangesResponse, summary="Supprimer un arrêt")
def delete_stop(stop_id: int, db: Session = Depends(get_db)):
    try:
        return {"changes": transport_service.delete_stop(db, stop_id)}
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
