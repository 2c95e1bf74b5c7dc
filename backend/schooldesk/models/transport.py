"""
Modèles SQLAlchemy pour les lignes de bus et leurs arrêts.
"""

from sqlalchemy import Column, Float, ForeignKey, Integer, String

from schooldesk.database import Base


class BusRoute(Base):
    __tablename__ = "bus_routes"

    id = Column(Integer, primary_key=True)
    route_name = Column(String(200), nullable=False)
    driver_id = Column(Integer, ForeignKey("staff.id", ondelete="SET NULL"), nullable=True)


class BusStop(Base):
    """Arrêt d'une ligne ; fee_amount est le montant de transport facturé aux élèves rattachés."""
    __tablename__ = "bus_stops"

    id = Column(Integer, primary_key=True)
    bus_route_id = Column(Integer, ForeignKey("bus_routes.id", ondelete="RESTRICT"), nullable=False)
    stop_name = Column(String(200), nullable=False)
    fee_amount = Column(Float, nullable=False, default=0, server_default="0")
