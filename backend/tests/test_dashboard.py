"""Tests for the dashboard presentation text."""
import random
from datetime import datetime, timedelta

import pytest

from fortis.models import StatsSnapshot
from fortis.services.dashboard import (
    MOTIVATIONAL_QUOTES,
    build_dashboard,
    format_volume,
    header_card,
    pick_quote,
    progress_ring_fraction,
    stat_cards,
    time_based_greeting,
    today_card,
    weekly_card,
)


@pytest.mark.parametrize(
    "hour, greeting",
    [
        (0, "Good morning"),
        (11, "Good morning"),
        (12, "Good afternoon"),
        (16, "Good afternoon"),
        (17, "Good evening"),
        (23, "Good evening"),
    ],
)
def test_time_based_greeting(hour, greeting):
    assert time_based_greeting(datetime(2024, 5, 15, hour, 30)) == greeting


def test_pick_quote_is_reproducible_with_seeded_rng():
    first = pick_quote(random.Random(7))
    second = pick_quote(random.Random(7))

    assert first == second
    assert first in MOTIVATIONAL_QUOTES


def test_pick_quote_from_custom_pool():
    assert pick_quote(random.Random(1), quotes=["Lift."]) == "Lift."


def test_pick_quote_rejects_empty_pool():
    with pytest.raises(ValueError):
        pick_quote(quotes=[])


@pytest.mark.parametrize(
    "volume, expected",
    [
        (0, "0"),
        (850.0, "850"),
        (312.5, "312.5"),
        (999, "999"),
        (1000, "1.0k"),
        (12540, "12.5k"),
    ],
)
def test_format_volume(volume, expected):
    assert format_volume(volume) == expected


def test_progress_ring_fraction_is_capped():
    assert progress_ring_fraction(StatsSnapshot(weekly_progress_percent=50)) == 0.5
    assert progress_ring_fraction(StatsSnapshot(weekly_progress_percent=125)) == 1.0


def test_header_card_fallbacks():
    now = datetime(2024, 5, 15, 8, 0)

    named = header_card("sam", now)
    anonymous = header_card("", now)

    assert named.display_name == "sam"
    assert named.initial == "S"
    assert named.greeting == "Good morning"
    assert anonymous.display_name == "Athlete"
    assert anonymous.initial == "U"


def test_today_card_after_workout():
    card = today_card(StatsSnapshot(did_workout_today=True))

    assert card.completed is True
    assert card.title.startswith("Workout Complete!")
    assert card.action_label is None


def test_today_card_call_to_action():
    card = today_card(StatsSnapshot(did_workout_today=False))

    assert card.completed is False
    assert card.title == "Ready for your workout?"
    assert card.action_label == "Start Today's Workout"


def test_weekly_card_labels():
    snapshot = StatsSnapshot(
        weekly_workout_count=3,
        weekly_progress_percent=62.5,
        current_streak_days=2,
    )

    card = weekly_card(snapshot)

    assert card.workouts_label == "3/4"
    assert card.progress_label == "63%"
    assert card.ring_fraction == 0.625
    assert card.show_streak_flame is True


def test_weekly_card_without_streak_hides_flame():
    assert weekly_card(StatsSnapshot()).show_streak_flame is False


def test_stat_cards_show_zero_completion_without_weekly_workouts():
    cards = stat_cards(StatsSnapshot(weekly_completion_rate=80), total_workouts=12)

    values = {card.label: card.value for card in cards}
    assert values == {
        "Total Workouts": "12",
        "Weekly Volume": "0",
        "Avg Intensity": "3/5",
        "Completion": "0%",
    }


def test_stat_cards_with_weekly_workouts():
    snapshot = StatsSnapshot(
        weekly_workout_count=2,
        weekly_total_volume=4200,
        weekly_average_intensity=4,
        weekly_completion_rate=88,
    )

    values = {card.label: card.value for card in stat_cards(snapshot, total_workouts=30)}

    assert values["Weekly Volume"] == "4.2k"
    assert values["Avg Intensity"] == "4/5"
    assert values["Completion"] == "88%"


def test_build_dashboard_end_to_end():
    now = datetime(2024, 5, 15, 14, 0)
    workouts = [
        {"date": (now - timedelta(hours=3)).isoformat(), "total_volume": 2500, "average_intensity": 4},
        {"date": (now - timedelta(days=1)).isoformat(), "totalVolume": 1500, "completion_percentage": 100},
        {"date": (now - timedelta(days=20)).isoformat(), "total_volume": 9000},
    ]

    view = build_dashboard(workouts, username="alex", now=now, rng=random.Random(3))

    assert view.header.greeting == "Good afternoon"
    assert view.header.initial == "A"
    assert view.quote == pick_quote(random.Random(3))
    assert view.today.completed is True
    assert view.weekly.workouts_label == "2/4"
    assert view.weekly.progress_label == "50%"
    assert view.weekly.streak_days == 2
    values = {card.label: card.value for card in view.stats}
    assert values["Total Workouts"] == "3"
    assert values["Weekly Volume"] == "4.0k"
    assert values["Avg Intensity"] == "4/5"
    assert values["Completion"] == "50%"
    assert view.snapshot.last_workout.total_volume == 2500
