"""Tests for the consecutive-day streak scan."""
from datetime import datetime, timedelta

from fortis.services.analytics import compute_streak

NOW = datetime(2024, 5, 15, 18, 0)


def days_ago(*offsets, hour=9):
    return [(NOW - timedelta(days=d)).replace(hour=hour) for d in offsets]


def test_no_workouts_means_no_streak():
    result = compute_streak([], NOW)

    assert result.days == 0
    assert result.did_workout_today is False


def test_input_order_does_not_matter():
    result = compute_streak(days_ago(2, 0, 3, 1), NOW)

    assert result.days == 4


def test_gap_before_yesterday_ends_streak():
    assert compute_streak(days_ago(1, 3, 4, 5), NOW).days == 1


def test_missing_today_and_yesterday_means_no_streak():
    result = compute_streak(days_ago(2, 3), NOW)

    assert result.days == 0
    assert result.did_workout_today is False


def test_duplicates_inside_the_streak_are_skipped():
    moments = days_ago(0, 1, 2) + days_ago(1, 2, hour=20)

    assert compute_streak(moments, NOW).days == 3


def test_future_workouts_never_extend_streak():
    moments = days_ago(-3, -1, 0, 1)

    result = compute_streak(moments, NOW)

    assert result.days == 2
    assert result.did_workout_today is True


def test_workout_later_today_than_reference_still_counts_as_today():
    late_tonight = NOW.replace(hour=23, minute=30)

    result = compute_streak([late_tonight], NOW)

    assert result.did_workout_today is True
    assert result.days == 1


def test_just_after_midnight_counts_as_new_day():
    just_after_midnight = NOW.replace(hour=0, minute=1)
    late_last_night = (NOW - timedelta(days=1)).replace(hour=23, minute=59)

    result = compute_streak([just_after_midnight, late_last_night], NOW)

    assert result.days == 2
