"""Tolerant extraction of skills-tracker stats from loosely structured JSON."""

from portfolio_intel.normalizer.engine import DEFAULT_DISABLED_MESSAGE, is_disabled, normalize
from portfolio_intel.normalizer.extractors import (
    extract_rank,
    extract_room_count,
    extract_rooms,
    extract_skills,
    normalize_skill_value,
)
from portfolio_intel.normalizer.traversal import MAX_ENVELOPE_DEPTH, pick_deep, unwrap_envelope

__all__ = [
    "DEFAULT_DISABLED_MESSAGE",
    "MAX_ENVELOPE_DEPTH",
    "extract_rank",
    "extract_room_count",
    "extract_rooms",
    "extract_skills",
    "is_disabled",
    "normalize",
    "normalize_skill_value",
    "pick_deep",
    "unwrap_envelope",
]
