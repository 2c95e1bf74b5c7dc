"""
Modèles SQLAlchemy pour la facturation.

FeeStructure = montant attendu par (classe, type de frais), simple modèle.
Fee = charge réelle matérialisée pour un élève, indépendante de la structure une fois créée.
"""

from sqlalchemy import Column, Date, Float, ForeignKey, Integer, String

from schooldesk.database import Base


class FeeStructure(Base):
    __tablename__ = "fee_structures"

    id = Column(Integer, primary_key=True)
    class_id = Column(Integer, ForeignKey("classes.id", ondelete="RESTRICT"), nullable=True)  # NULL = toutes classes
    fee_type = Column(String(100), nullable=False)
    amount = Column(Float, nullable=False)


class Fee(Base):
    __tablename__ = "fees"

    id = Column(Integer, primary_key=True)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="RESTRICT"), nullable=False)
    amount = Column(Float, nullable=False)
    status = Column(String(50), nullable=False)  # texte libre : Paid, Due, ...
    due_date = Column(Date, nullable=True)
    fee_type = Column(String(100), nullable=True)
