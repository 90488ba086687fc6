"""
Dashboard statistics snapshot.

Produced fresh by the statistics engine on every call; nothing is carried
over between snapshots.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from fortis.models.workout import WorkoutRecord

WEEKLY_GOAL = 4


class StatsSnapshot(BaseModel):
    """Immutable result of one statistics computation."""

    model_config = ConfigDict(frozen=True)

    weekly_workout_count: int = Field(0, ge=0)
    current_streak_days: int = Field(0, ge=0)
    weekly_total_volume: float = Field(0.0, ge=0)
    last_workout: Optional[WorkoutRecord] = None
    weekly_goal: int = Field(WEEKLY_GOAL, gt=0)
    # Not clamped: five workouts against a goal of four reads 125
    weekly_progress_percent: float = 0.0
    did_workout_today: bool = False
    weekly_average_intensity: int = 3
    weekly_completion_rate: int = 0

    def to_dict(self) -> dict:
        """Convert to the key layout the mobile client renders."""
        return {
            "weeklyWorkouts": self.weekly_workout_count,
            "currentStreak": self.current_streak_days,
            "totalVolume": self.weekly_total_volume,
            "lastWorkout": self.last_workout.to_dict() if self.last_workout else None,
            "weeklyGoal": self.weekly_goal,
            "weeklyProgress": self.weekly_progress_percent,
            "todayWorkout": self.did_workout_today,
            "weeklyAverageIntensity": self.weekly_average_intensity,
            "weeklyCompletionRate": self.weekly_completion_rate,
        }
