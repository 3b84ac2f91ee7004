"""Application use cases package."""

from .get_dashboard_stats import DashboardStats, GetDashboardStatsUseCase

__all__ = [
    "GetDashboardStatsUseCase",
    "DashboardStats",
]
