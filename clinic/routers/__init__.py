# Routers package
from . import appointments_router
from . import vacations_router
from . import doctors_router
from . import specialties_router
from . import investigations_router
from . import working_hours_router
from . import holidays_router
from . import operational_date_router

__all__ = [
    "appointments_router",
    "vacations_router",
    "doctors_router",
    "specialties_router",
    "investigations_router",
    "working_hours_router",
    "holidays_router",
    "operational_date_router",
]
