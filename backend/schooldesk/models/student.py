"""
Modèle SQLAlchemy pour la table students.
Un élève n'est jamais supprimé physiquement : il passe au statut Left (archivage).
"""

from sqlalchemy import CheckConstraint, Column, Date, ForeignKey, Integer, String, Text

from schooldesk.database import Base
from schooldesk.models.status import ACTIVE


class Student(Base):
    __tablename__ = "students"
    __table_args__ = (
        CheckConstraint("status IN ('Active', 'Left')", name="ck_students_status"),
    )

    id = Column(Integer, primary_key=True)
    name = Column(String(200), nullable=False)
    section_id = Column(Integer, ForeignKey("sections.id", ondelete="SET NULL"), nullable=True)
    dob = Column(Date, nullable=True)
    gender = Column(String(20), nullable=True)
    phone = Column(String(50), nullable=True)
    parent_name = Column(String(200), nullable=True)
    parent_phone = Column(String(50), nullable=True)
    address = Column(Text, nullable=True)
    bus_stop_id = Column(Integer, ForeignKey("bus_stops.id", ondelete="SET NULL"), nullable=True)
    status = Column(String(20), nullable=False, default=ACTIVE, server_default=ACTIVE)
