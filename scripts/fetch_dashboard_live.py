#!/usr/bin/env python3
"""Quick live check of the concurrent dashboard fetch against a running backend.

Run:
  poetry run python scripts/fetch_dashboard_live.py                          # localhost:8080
  poetry run python scripts/fetch_dashboard_live.py https://api.example.com  # explicit base
"""

import sys

from portfolio_intel.client import run_dashboard
from portfolio_intel.display import format_number, room_lines


def main() -> None:
    base_url = sys.argv[1] if len(sys.argv) > 1 else None
    print(f"Fetching dashboard from {base_url or 'default bases'}...")

    dashboard = run_dashboard(base_url=base_url)
    stats = dashboard.stats
    if dashboard.profile:
        print(f"Profile: {dashboard.profile.display_name or 'N/A'}")
    print(f"Got {len(dashboard.repos)} repos, {len(dashboard.projects)} carousel projects")
    if stats.disabled:
        print(f"TryHackMe: {stats.message}")
    else:
        print(f"Rank: {format_number(stats.rank)}  Rooms: {format_number(stats.rooms_completed)}")
        for line in room_lines(stats.rooms, stats.room_count, limit=5):
            print(f"  {line}")
    for point in dashboard.chart.points:
        print(f"  {point.name}: {point.value:.0f} (ratio {point.ratio:.2f})")

    if dashboard.ok:
        print("\n✅ All sections loaded.")
    else:
        for section, message in dashboard.errors.items():
            print(f"\n⚠️ {section} unavailable: {message}")


if __name__ == "__main__":
    main()
