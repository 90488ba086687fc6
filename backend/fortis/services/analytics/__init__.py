"""
Analytics module - Workout statistics for the dashboard.

This module provides:
- A data adapter normalizing raw workout dicts into typed records
- The weekly window filter and aggregate reduction
- The consecutive-day streak scan
- The statistics calculator engine
"""
from fortis.services.analytics.adapter import (
    FIELD_ALIASES,
    METRIC_DEFAULTS,
    WorkoutAdapter,
    check_metric,
    get_adapter,
    parse_date,
)
from fortis.services.analytics.calculator import (
    StatsCalculator,
    align_to,
    compute_stats,
)
from fortis.services.analytics.streak import StreakResult, compute_streak
from fortis.services.analytics.weekly import (
    WEEKLY_WINDOW,
    WeeklyAggregates,
    filter_weekly,
    reduce_weekly,
    round_half_up,
)

__all__ = [
    # Adapter
    "FIELD_ALIASES",
    "METRIC_DEFAULTS",
    "WorkoutAdapter",
    "check_metric",
    "get_adapter",
    "parse_date",
    # Weekly
    "WEEKLY_WINDOW",
    "WeeklyAggregates",
    "filter_weekly",
    "reduce_weekly",
    "round_half_up",
    # Streak
    "StreakResult",
    "compute_streak",
    # Calculator
    "StatsCalculator",
    "align_to",
    "compute_stats",
]
