"""Data layer for the portfolio site: TryHackMe payload normalization and radar chart layout."""

from portfolio_intel.chart import build_radar_chart, layout_skills
from portfolio_intel.normalizer import normalize, pick_deep

__all__ = ["build_radar_chart", "layout_skills", "normalize", "pick_deep"]
