"""
Modèles SQLAlchemy pour les classes et leurs sections.
Nommé school_class pour éviter le conflit avec le mot-clé Python 'class'.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint

from schooldesk.database import Base


class SchoolClass(Base):
    __tablename__ = "classes"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), unique=True, nullable=False)


class Section(Base):
    """Subdivision d'une classe, avec un enseignant titulaire optionnel."""
    __tablename__ = "sections"
    __table_args__ = (
        UniqueConstraint("class_id", "section_name", name="uq_sections_class_section"),
    )

    id = Column(Integer, primary_key=True)
    class_id = Column(Integer, ForeignKey("classes.id", ondelete="RESTRICT"), nullable=False)
    section_name = Column(String(50), nullable=False)
    teacher_id = Column(Integer, ForeignKey("staff.id", ondelete="SET NULL"), nullable=True)
