"""
Service métier pour les lignes de bus et leurs arrêts.
"""

import logging
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from schooldesk.models.staff import Staff
from schooldesk.models.transport import BusRoute, BusStop
from schooldesk.schemas.transport import BusRouteCreate, BusRouteResponse, BusStopCreate, BusStopResponse
from schooldesk.services.integrity import execute_write, insert_row

logger = logging.getLogger(__name__)


def get_routes(db: Session) -> list[BusRouteResponse]:
    """Retourne les lignes avec le nom de leur chauffeur (null si aucun)."""
    rows = db.execute(
        select(BusRoute, Staff.name)
        .outerjoin(Staff, BusRoute.driver_id == Staff.id)
        .order_by(BusRoute.id)
    ).all()
    return [
        BusRouteResponse(
            id=route.id,
            route_name=route.route_name,
            driver_id=route.driver_id,
            driver_name=driver_name,
        )
        for route, driver_name in rows
    ]


def create_route(db: Session, data: BusRouteCreate) -> int:
    route_id = insert_row(
        db,
        BusRoute(route_name=data.route_name, driver_id=data.driver_id),
        duplicate_message="Cette ligne existe déjà.",
        reference_message=f"Chauffeur {data.driver_id} introuvable.",
    )
    logger.info("Ligne de bus créée : %s (%s)", data.route_name, route_id)
    return route_id


def delete_route(db: Session, route_id: int) -> int:
    """Supprime une ligne. Bloqué tant qu'elle possède des arrêts."""
    changes = execute_write(
        db,
        delete(BusRoute).where(BusRoute.id == route_id),
        "Impossible de supprimer cette ligne : des arrêts y sont rattachés.",
    )
    logger.info("Ligne de bus %s supprimée (%d ligne(s))", route_id, changes)
    return changes


def get_stops(db: Session, bus_route_id: Optional[int] = None) -> list[BusStopResponse]:
    query = (
        select(BusStop, BusRoute.route_name)
        .join(BusRoute, BusStop.bus_route_id == BusRoute.id)
        .order_by(BusStop.id)
    )
    if bus_route_id is not None:
        query = query.where(BusStop.bus_route_id == bus_route_id)

    return [
        BusStopResponse(
            id=stop.id,
            bus_route_id=stop.bus_route_id,
            stop_name=stop.stop_name,
            fee_amount=stop.fee_amount,
            route_name=route_name,
        )
        for stop, route_name in db.execute(query).all()
    ]


def create_stop(db: Session, data: BusStopCreate) -> int:
    stop_id = insert_row(
        db,
        BusStop(bus_route_id=data.bus_route_id, stop_name=data.stop_name, fee_amount=data.fee_amount),
        duplicate_message="Cet arrêt existe déjà.",
        reference_message=f"Ligne de bus {data.bus_route_id} introuvable.",
    )
    logger.info("Arrêt créé : %s (ligne %s, id %s)", data.stop_name, data.bus_route_id, stop_id)
    return stop_id


def delete_stop(db: Session, stop_id: int) -> int:
    """Supprime un arrêt ; les élèves rattachés n'ont plus d'arrêt (SET NULL)."""
    changes = execute_write(
        db,
        delete(BusStop).where(BusStop.id == stop_id),
        "Impossible de supprimer cet arrêt.",
    )
    logger.info("Arrêt %s supprimé (%d ligne(s))", stop_id, changes)
    return changes
