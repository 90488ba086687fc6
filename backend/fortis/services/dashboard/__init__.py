"""
Dashboard module - Presentation text for the dashboard screen.
"""
from fortis.services.dashboard.formatter import (
    DashboardView,
    HeaderCard,
    StatCard,
    TodayCard,
    WeeklyCard,
    build_dashboard,
    format_volume,
    header_card,
    progress_ring_fraction,
    stat_cards,
    today_card,
    weekly_card,
)
from fortis.services.dashboard.messages import (
    MOTIVATIONAL_QUOTES,
    pick_quote,
    time_based_greeting,
)

__all__ = [
    "DashboardView",
    "HeaderCard",
    "StatCard",
    "TodayCard",
    "WeeklyCard",
    "build_dashboard",
    "format_volume",
    "header_card",
    "progress_ring_fraction",
    "stat_cards",
    "today_card",
    "weekly_card",
    "MOTIVATIONAL_QUOTES",
    "pick_quote",
    "time_based_greeting",
]
