# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant que SQLAlchemy tente de résoudre les clés étrangères inter-modèles
# (sections.teacher_id → staff.id, students.bus_stop_id → bus_stops.id, ...).

from schooldesk.models.staff import Staff, StaffRole  # noqa: F401  — doit précéder sections et bus_routes
from schooldesk.models.school_class import SchoolClass, Section  # noqa: F401
from schooldesk.models.transport import BusRoute, BusStop  # noqa: F401
from schooldesk.models.student import Student  # noqa: F401
from schooldesk.models.fee import Fee, FeeStructure  # noqa: F401
