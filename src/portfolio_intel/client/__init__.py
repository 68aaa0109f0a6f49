"""Backend API client and concurrent dashboard fetch."""

from portfolio_intel.client.api import PortfolioApiClient, PortfolioApiError
from portfolio_intel.client.dashboard import Dashboard, build_dashboard, fetch_dashboard, run_dashboard

__all__ = [
    "Dashboard",
    "PortfolioApiClient",
    "PortfolioApiError",
    "build_dashboard",
    "fetch_dashboard",
    "run_dashboard",
]
