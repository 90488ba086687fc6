"""
Services module - Dashboard business logic layer.

Modules:
- analytics: Workout statistics engine
- dashboard: Presentation text for the dashboard screen
"""
from fortis.services.analytics import StatsCalculator, compute_stats
from fortis.services.dashboard import DashboardView, build_dashboard

__all__ = [
    "StatsCalculator",
    "compute_stats",
    "DashboardView",
    "build_dashboard",
]
