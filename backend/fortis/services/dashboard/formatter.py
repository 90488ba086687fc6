"""
Dashboard Formatter - Turn a statistics snapshot into dashboard card text.

Produces plain values and labels only; layout and styling belong to the
mobile client.
"""
import random
from datetime import datetime
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict

from fortis.core.config import settings
from fortis.core.logging import get_logger
from fortis.models.stats import StatsSnapshot
from fortis.services.analytics import StatsCalculator, round_half_up
from fortis.services.analytics.adapter import RawWorkout
from fortis.services.dashboard.messages import pick_quote, time_based_greeting

logger = get_logger(__name__)


# ========================================
# Card Schemas
# ========================================

class HeaderCard(BaseModel):
    """Greeting line and profile badge."""
    model_config = ConfigDict(frozen=True)

    greeting: str
    display_name: str
    initial: str


class TodayCard(BaseModel):
    """Today's focus: either a congratulation or the call-to-action."""
    model_config = ConfigDict(frozen=True)

    completed: bool
    title: str
    subtitle: Optional[str] = None
    action_label: Optional[str] = None


class WeeklyCard(BaseModel):
    """This week's progress ring and streak."""
    model_config = ConfigDict(frozen=True)

    ring_fraction: float
    progress_label: str
    workouts_label: str
    streak_days: int
    show_streak_flame: bool


class StatCard(BaseModel):
    """One tile of the "Your Stats" grid."""
    model_config = ConfigDict(frozen=True)

    label: str
    value: str


class DashboardView(BaseModel):
    """Everything the dashboard screen displays, already formatted."""
    model_config = ConfigDict(frozen=True)

    header: HeaderCard
    quote: str
    today: TodayCard
    weekly: WeeklyCard
    stats: List[StatCard]
    snapshot: StatsSnapshot


# ========================================
# Formatting Rules
# ========================================

def _plain_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_volume(volume: float) -> str:
    """Volumes from 1000 up are shown in thousands: 12500 -> "12.5k"."""
    if volume >= 1000:
        return f"{volume / 1000:.1f}k"
    return _plain_number(volume)


def progress_ring_fraction(snapshot: StatsSnapshot) -> float:
    """Ring fill in [0, 1]; the percent itself is not clamped."""
    return min(snapshot.weekly_progress_percent / 100, 1.0)


def header_card(username: Optional[str], now: Optional[datetime] = None) -> HeaderCard:
    """Greeting plus the name and initial, with fallbacks for an empty profile."""
    return HeaderCard(
        greeting=time_based_greeting(now),
        display_name=username or settings.DEFAULT_USERNAME,
        initial=username[0].upper() if username else settings.DEFAULT_INITIAL,
    )


def today_card(snapshot: StatsSnapshot) -> TodayCard:
    if snapshot.did_workout_today:
        return TodayCard(
            completed=True,
            title="Workout Complete! \U0001F389",
            subtitle="Great job staying consistent!",
        )
    return TodayCard(
        completed=False,
        title="Ready for your workout?",
        action_label="Start Today's Workout",
    )


def weekly_card(snapshot: StatsSnapshot) -> WeeklyCard:
    return WeeklyCard(
        ring_fraction=progress_ring_fraction(snapshot),
        progress_label=f"{round_half_up(snapshot.weekly_progress_percent)}%",
        workouts_label=f"{snapshot.weekly_workout_count}/{snapshot.weekly_goal}",
        streak_days=snapshot.current_streak_days,
        show_streak_flame=snapshot.current_streak_days > 0,
    )


def stat_cards(snapshot: StatsSnapshot, total_workouts: int) -> List[StatCard]:
    """
    Build the "Your Stats" grid.

    Total workouts counts the full collection; the other tiles are weekly.
    Completion shows 0% outright when there were no workouts this week.
    """
    if snapshot.weekly_workout_count == 0:
        completion = "0%"
    else:
        completion = f"{snapshot.weekly_completion_rate}%"

    return [
        StatCard(label="Total Workouts", value=str(total_workouts)),
        StatCard(label="Weekly Volume", value=format_volume(snapshot.weekly_total_volume)),
        StatCard(label="Avg Intensity", value=f"{snapshot.weekly_average_intensity or 0}/5"),
        StatCard(label="Completion", value=completion),
    ]


def build_dashboard(
    workouts: Iterable[RawWorkout],
    username: Optional[str] = None,
    now: Optional[datetime] = None,
    rng: Optional[random.Random] = None,
    calculator: Optional[StatsCalculator] = None,
) -> DashboardView:
    """
    Assemble the full dashboard view.

    Args:
        workouts: Raw workout dicts or typed records
        username: Profile username, may be empty
        now: Reference instant for greeting and statistics
        rng: Random source for the quote
        calculator: Engine to use (a default one is created when omitted)

    Returns:
        DashboardView with every card formatted
    """
    if now is None:
        now = datetime.now()
    calculator = calculator or StatsCalculator()

    records = calculator.adapter.normalize_many(workouts)
    snapshot = calculator.compute(records, now=now)

    view = DashboardView(
        header=header_card(username, now),
        quote=pick_quote(rng),
        today=today_card(snapshot),
        weekly=weekly_card(snapshot),
        stats=stat_cards(snapshot, total_workouts=len(records)),
        snapshot=snapshot,
    )

    logger.debug(
        "Built dashboard view",
        total_workouts=len(records),
        did_workout_today=snapshot.did_workout_today,
    )

    return view
