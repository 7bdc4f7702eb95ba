# Schemas package (re-export feature modules for stable imports)
from .appointments.appointment import *
from .vacations.vacation import *
from .catalog.catalog import *
from .common.common import *
