"""Dashboard API."""

from web.api.dashboard.views import get_overview, get_results

__all__ = [
    "get_results",
    "get_overview",
]
