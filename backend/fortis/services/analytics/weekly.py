"""
Weekly window filter and aggregate reduction.

The window is a trailing 7x24h span measured from the exact reference
instant. Calendar days play no part here; see streak.py for the
day-granular metrics.
"""
import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, List, Sequence, Tuple

from fortis.models.workout import DEFAULT_AVERAGE_INTENSITY, WorkoutRecord

WEEKLY_WINDOW = timedelta(days=7)


@dataclass(frozen=True)
class WeeklyAggregates:
    """Reductions over the weekly subset."""
    workout_count: int
    total_volume: float
    average_intensity: int
    completion_rate: int


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up."""
    return int(math.floor(value + 0.5))


def filter_weekly(
    dated: Iterable[Tuple[datetime, WorkoutRecord]],
    now: datetime,
) -> List[WorkoutRecord]:
    """
    Select the records inside the trailing week.

    Args:
        dated: (aligned date, record) pairs
        now: Reference instant, same awareness as the aligned dates

    Returns:
        Records dated at or after now - 7 days. There is no upper bound:
        records dated after now stay in.
    """
    window_start = now - WEEKLY_WINDOW
    return [record for moment, record in dated if moment >= window_start]


def reduce_weekly(weekly: Sequence[WorkoutRecord]) -> WeeklyAggregates:
    """
    Reduce the weekly subset to its dashboard aggregates.

    An empty subset is valid: the divisor is floored at 1, so intensity
    comes out at the neutral 3 and completion at 0.
    """
    count = len(weekly)
    divisor = max(1, count)

    if count:
        intensity_sum = sum(record.average_intensity for record in weekly)
    else:
        intensity_sum = DEFAULT_AVERAGE_INTENSITY
    completion_sum = sum(record.completion_percentage for record in weekly)
    volume = sum(record.total_volume for record in weekly)

    return WeeklyAggregates(
        workout_count=count,
        total_volume=volume,
        average_intensity=round_half_up(intensity_sum / divisor),
        completion_rate=round_half_up(completion_sum / divisor),
    )
