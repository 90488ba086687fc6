"""
Stats Calculator - Main engine for the dashboard statistics.

Orchestrates:
- Date alignment against the reference instant
- Weekly window filter and aggregate reduction
- Streak scan over the full collection
- Snapshot assembly
"""
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from fortis.core.config import settings
from fortis.core.exceptions import InvalidInputError
from fortis.core.logging import get_logger
from fortis.models.stats import StatsSnapshot
from fortis.models.workout import WorkoutRecord
from fortis.services.analytics.adapter import (
    METRIC_DEFAULTS,
    RawWorkout,
    WorkoutAdapter,
    check_metric,
    get_adapter,
)
from fortis.services.analytics.streak import compute_streak
from fortis.services.analytics.weekly import filter_weekly, reduce_weekly

logger = get_logger(__name__)


def align_to(moment: datetime, reference: datetime) -> datetime:
    """
    Express a record date in the reference instant's frame.

    Aware dates are converted into the reference timezone (local time when
    the reference is naive); naive dates are read as wall-clock time in
    the reference timezone.
    """
    moment_aware = moment.tzinfo is not None and moment.utcoffset() is not None
    reference_aware = reference.tzinfo is not None and reference.utcoffset() is not None

    if moment_aware and reference_aware:
        return moment.astimezone(reference.tzinfo)
    if moment_aware:
        return moment.astimezone().replace(tzinfo=None)
    if reference_aware:
        return moment.replace(tzinfo=reference.tzinfo)
    return moment


def _align_all(
    workouts: Sequence[WorkoutRecord],
    now: datetime,
) -> List[Tuple[datetime, WorkoutRecord]]:
    dated = []
    for idx, record in enumerate(workouts):
        if not isinstance(record, WorkoutRecord):
            raise InvalidInputError(
                f"Expected WorkoutRecord, got {type(record).__name__}",
                value=record,
                index=idx,
            )
        if not isinstance(record.date, datetime):
            raise InvalidInputError(
                f"Workout date must be a datetime, got {type(record.date).__name__}",
                field="date",
                value=record.date,
                index=idx,
            )
        # Typed records can skip the adapter, so their metrics are checked here
        for field_name in METRIC_DEFAULTS:
            check_metric(field_name, getattr(record, field_name), index=idx)
        try:
            dated.append((align_to(record.date, now), record))
        except (OverflowError, OSError, ValueError) as exc:
            raise InvalidInputError(
                f"Workout date cannot be aligned to the reference instant: {exc}",
                field="date",
                value=record.date,
                index=idx,
            ) from exc
    return dated


def compute_stats(
    workouts: Iterable[WorkoutRecord],
    now: Optional[datetime] = None,
    weekly_goal: Optional[int] = None,
) -> StatsSnapshot:
    """
    Derive the dashboard statistics from a workout collection.

    Args:
        workouts: Typed workout records, in any order
        now: Reference instant (defaults to the current local time)
        weekly_goal: Weekly target (defaults to settings.WEEKLY_GOAL)

    Returns:
        A fresh StatsSnapshot

    Raises:
        InvalidInputError: If a record's date cannot be ordered against now,
            or one of its metrics is not a finite number
    """
    if now is None:
        now = datetime.now()
    if weekly_goal is None:
        weekly_goal = settings.WEEKLY_GOAL
    if weekly_goal <= 0:
        raise InvalidInputError(
            f"Weekly goal must be positive, got {weekly_goal}",
            field="weekly_goal",
            value=weekly_goal,
        )

    # Work on a private copy so the caller's collection cannot shift under us
    records: Tuple[WorkoutRecord, ...] = tuple(workouts)
    dated = _align_all(records, now)

    # Step 1: Weekly subset, shared by every weekly metric
    weekly = filter_weekly(dated, now)
    aggregates = reduce_weekly(weekly)

    # Step 2: Streak over the full collection
    streak = compute_streak([moment for moment, _ in dated], now)

    # Step 3: Most recent workout; max() keeps the first of tied records
    last_workout = max(dated, key=lambda pair: pair[0])[1] if dated else None

    snapshot = StatsSnapshot(
        weekly_workout_count=aggregates.workout_count,
        current_streak_days=streak.days,
        weekly_total_volume=aggregates.total_volume,
        last_workout=last_workout,
        weekly_goal=weekly_goal,
        weekly_progress_percent=aggregates.workout_count / weekly_goal * 100,
        did_workout_today=streak.did_workout_today,
        weekly_average_intensity=aggregates.average_intensity,
        weekly_completion_rate=aggregates.completion_rate,
    )

    logger.debug(
        "Computed dashboard statistics",
        total_workouts=len(records),
        weekly_workouts=snapshot.weekly_workout_count,
        streak_days=snapshot.current_streak_days,
        did_workout_today=snapshot.did_workout_today,
    )

    return snapshot


class StatsCalculator:
    """
    Statistics engine with raw-data ingestion.

    Usage:
        calculator = StatsCalculator()
        snapshot = calculator.compute_from_raw(
            [{"date": "2024-05-01T07:30:00", "total_volume": 5200}, ...]
        )
    """

    def __init__(
        self,
        adapter: Optional[WorkoutAdapter] = None,
        weekly_goal: Optional[int] = None,
    ):
        self.adapter = adapter or get_adapter()
        self.weekly_goal = weekly_goal if weekly_goal is not None else settings.WEEKLY_GOAL

    def compute(
        self,
        workouts: Iterable[WorkoutRecord],
        now: Optional[datetime] = None,
    ) -> StatsSnapshot:
        """Compute statistics over already typed records."""
        return compute_stats(workouts, now=now, weekly_goal=self.weekly_goal)

    def compute_from_raw(
        self,
        raw_workouts: Iterable[RawWorkout],
        now: Optional[datetime] = None,
    ) -> StatsSnapshot:
        """
        Normalize raw workout dicts, then compute statistics.

        Args:
            raw_workouts: Dicts as stored by the mobile backend (typed
                records are accepted too)
            now: Reference instant

        Returns:
            A fresh StatsSnapshot
        """
        records = self.adapter.normalize_many(raw_workouts)
        return self.compute(records, now=now)

    def compute_as_dict(
        self,
        raw_workouts: Iterable[RawWorkout],
        now: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        """Same as compute_from_raw, in the mobile client's key layout."""
        return self.compute_from_raw(raw_workouts, now=now).to_dict()
