"""Payload normalizer: arbitrary skills-tracker JSON -> NormalizedStats."""

import logging
from typing import Any, Union

from portfolio_intel.models.raw import RawPayload
from portfolio_intel.models.stats import NormalizedStats

from .extractors import (
    extract_rank,
    extract_room_count,
    extract_rooms,
    extract_skills,
    extract_skills_error,
)
from .traversal import unwrap_envelope

logger = logging.getLogger(__name__)

DEFAULT_DISABLED_MESSAGE = "TryHackMe integration is disabled."


def is_disabled(payload: Any) -> bool:
    """True only for an explicit `enabled: false` signal."""
    return isinstance(payload, dict) and payload.get("enabled") is False


def normalize(raw: Union[RawPayload, Any]) -> NormalizedStats:
    """
    Normalize a skills-tracker payload. Never raises on payload content:
    missing or malformed fields come back as sentinels.
    """
    payload = raw.data if isinstance(raw, RawPayload) else raw

    if is_disabled(payload):
        message = payload.get("message")
        if not isinstance(message, str) or not message:
            message = DEFAULT_DISABLED_MESSAGE
        return NormalizedStats(disabled=True, message=message)

    node = unwrap_envelope(payload)
    stats = NormalizedStats(
        rank=extract_rank(node),
        room_count=extract_room_count(node),
        rooms=extract_rooms(node),
        skills=extract_skills(node),
        skills_error=extract_skills_error(node),
    )
    logger.debug(
        "Normalized payload: rank=%s room_count=%s rooms=%d skills=%d",
        stats.rank,
        stats.room_count,
        len(stats.rooms),
        len(stats.skills),
    )
    return stats
