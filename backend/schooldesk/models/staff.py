"""
Modèles SQLAlchemy pour le personnel et ses rôles.
"""

from sqlalchemy import CheckConstraint, Column, Date, ForeignKey, Integer, String, Text

from schooldesk.database import Base
from schooldesk.models.status import ACTIVE


class StaffRole(Base):
    __tablename__ = "staff_roles"

    id = Column(Integer, primary_key=True)
    role_name = Column(String(100), unique=True, nullable=False)


class Staff(Base):
    __tablename__ = "staff"
    __table_args__ = (
        CheckConstraint("status IN ('Active', 'Left')", name="ck_staff_status"),
    )

    id = Column(Integer, primary_key=True)
    name = Column(String(200), nullable=False)
    role_id = Column(Integer, ForeignKey("staff_roles.id", ondelete="RESTRICT"), nullable=True)
    phone = Column(String(50), nullable=True)
    dob = Column(Date, nullable=True)
    gender = Column(String(20), nullable=True)
    address = Column(Text, nullable=True)
    hire_date = Column(Date, nullable=True)
    qualifications = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default=ACTIVE, server_default=ACTIVE)
