"""
Consecutive-day workout streak.

Walks backward one calendar day at a time from today, or from yesterday
when nothing has been logged yet today, and stops at the first day
without a workout.
"""
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Sequence

ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class StreakResult:
    """Streak length and whether today already counts."""
    days: int
    did_workout_today: bool


def compute_streak(moments: Sequence[datetime], now: datetime) -> StreakResult:
    """
    Count consecutive workout days ending today or yesterday.

    Args:
        moments: Workout dates over the full collection, aligned to now
        now: Reference instant

    Returns:
        StreakResult. A day with several workouts counts once; workouts
        dated after the cursor (duplicates of a counted day, or future
        dates) are skipped without breaking the streak.
    """
    today = now.date()
    did_workout_today = any(moment.date() == today for moment in moments)

    if not moments:
        return StreakResult(days=0, did_workout_today=False)

    cursor: date = today if did_workout_today else today - ONE_DAY
    streak = 0

    for moment in sorted(moments, reverse=True):
        day = moment.date()
        if day == cursor:
            streak += 1
            cursor -= ONE_DAY
        elif day < cursor:
            break  # Gap found

    return StreakResult(days=streak, did_workout_today=did_workout_today)
