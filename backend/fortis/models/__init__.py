from fortis.models.workout import WorkoutRecord
from fortis.models.stats import StatsSnapshot, WEEKLY_GOAL

__all__ = [
    "WorkoutRecord",
    "StatsSnapshot",
    "WEEKLY_GOAL",
]
