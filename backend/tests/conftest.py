"""Shared fixtures for the statistics engine tests."""
from datetime import datetime, timedelta

import pytest

from fortis.models import WorkoutRecord

# Wednesday evening; every test measures "days ago" from here
REFERENCE_NOW = datetime(2024, 5, 15, 18, 0, 0)


@pytest.fixture
def now():
    return REFERENCE_NOW


@pytest.fixture
def make_record(now):
    """Build a WorkoutRecord dated a number of days before the reference instant."""

    def _make(days_ago=0, hour=9, minute=0, **metrics):
        day = now - timedelta(days=days_ago)
        date = day.replace(hour=hour, minute=minute, second=0, microsecond=0)
        return WorkoutRecord(date=date, **metrics)

    return _make
