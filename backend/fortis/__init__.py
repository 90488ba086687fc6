"""
Fortis - workout statistics engine behind the mobile dashboard.
"""
from fortis.models import StatsSnapshot, WorkoutRecord
from fortis.services.analytics import StatsCalculator, compute_stats

__version__ = "1.0.0"

__all__ = [
    "StatsSnapshot",
    "WorkoutRecord",
    "StatsCalculator",
    "compute_stats",
]
