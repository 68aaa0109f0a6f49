"""Field extractors: each degrades to a sentinel instead of raising."""

import math
import re
from typing import Any, Optional, Union

from portfolio_intel.models.stats import UNKNOWN, SkillEntry

from .traversal import pick_deep

RANK_PATTERN = re.compile(r"(global.?rank|world.?rank|^rank$|ranking)", re.IGNORECASE)
ROOM_COUNT_PATTERN = re.compile(
    r"(completedroomsnumber|rooms?completed|completedrooms|roomcount|rooms_count)",
    re.IGNORECASE,
)
ROOM_LIST_PATTERN = re.compile(r"(completedrooms|roomscompleted|roomslist|rooms)", re.IGNORECASE)
SKILLS_PATTERN = re.compile(r"(skills?matrix|skillmatrix|skills?$)", re.IGNORECASE)

DIRECT_SKILLS_KEYS = ("skillsmatrix", "skills_matrix")
ROOM_NAME_FIELDS = ("title", "name", "roomName", "slug")
SKILL_NAME_FIELDS = ("name", "skill", "category", "title")
SKILL_VALUE_FIELDS = ("score", "level", "value", "percent", "percentage")


def is_number(value: Any) -> bool:
    """JSON number check; bool is an int subclass but never a number here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def to_number(value: Any) -> float:
    """
    Coerce a JSON scalar to float; NaN when it has no numeric reading.
    Blank strings read as 0, integers too large for a float as +/-inf.
    """
    if is_number(value):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if "_" in text:
            return math.nan
        try:
            return float(text)
        except ValueError:
            return math.nan
    return math.nan


def is_numeric_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip()) and math.isfinite(to_number(value))


def first_present(mapping: dict, keys: tuple[str, ...]) -> Any:
    """First value that is not None, in key precedence order."""
    for key in keys:
        value = mapping.get(key)
        if value is not None:
            return value
    return None


def first_truthy(mapping: dict, keys: tuple[str, ...]) -> Any:
    """First non-empty value, in key precedence order."""
    for key in keys:
        value = mapping.get(key)
        if value:
            return value
    return None


def normalize_skill_value(value: Any) -> float:
    """
    Map a raw proficiency to the 0-100 scale.
    Fractions (<= 1) are scaled by 100; larger values are already percentages.
    Non-numeric, non-finite and negative input becomes 0.
    """
    num = to_number(value)
    if not math.isfinite(num) or num < 0:
        return 0.0
    return num * 100 if num <= 1 else num


def extract_rank(node: Any) -> Union[int, float, str]:
    """First rank-like field holding a number or numeric string, else 'Unknown'."""
    rank = pick_deep(
        node,
        lambda key, value: bool(RANK_PATTERN.search(key))
        and (is_number(value) or is_numeric_string(value)),
    )
    return UNKNOWN if rank is None else rank


def extract_room_count(node: Any) -> Optional[Union[int, float]]:
    """Explicit completed-room count; None when absent or not numeric (0 is a real count)."""
    value = pick_deep(
        node,
        lambda key, v: bool(ROOM_COUNT_PATTERN.search(key)) and (is_number(v) or isinstance(v, str)),
    )
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    num = to_number(value)
    if not math.isfinite(num):
        return None
    return int(num) if num.is_integer() else num


def _room_name(item: Any) -> str:
    if isinstance(item, str):
        return item
    if isinstance(item, dict):
        name = first_truthy(item, ROOM_NAME_FIELDS)
        return str(name) if name else ""
    return ""


def extract_rooms(node: Any) -> list[str]:
    """Completed room names in discovery order; empty arrays keep the search going."""
    rooms = pick_deep(
        node,
        lambda key, value: bool(ROOM_LIST_PATTERN.search(key)) and isinstance(value, list) and len(value) > 0,
    )
    if not isinstance(rooms, list):
        return []
    return [name for name in (_room_name(item) for item in rooms) if name]


def _find_skills_matrix(node: Any) -> Any:
    if isinstance(node, dict):
        for key, value in node.items():
            if str(key).lower() in DIRECT_SKILLS_KEYS and isinstance(value, (list, dict)):
                return value
    return pick_deep(
        node,
        lambda key, value: bool(SKILLS_PATTERN.search(key)) and isinstance(value, (list, dict)),
    )


def _skills_from_list(items: list) -> list[SkillEntry]:
    entries: list[SkillEntry] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        name = first_truthy(item, SKILL_NAME_FIELDS)
        if not name:
            continue
        value = normalize_skill_value(first_present(item, SKILL_VALUE_FIELDS))
        entries.append(SkillEntry(name=str(name), value=value))
    return entries


def _skills_from_map(matrix: dict) -> list[SkillEntry]:
    entries: list[SkillEntry] = []
    for name, raw in matrix.items():
        if not name:
            continue
        if is_number(raw) or isinstance(raw, str):
            value = normalize_skill_value(raw)
        elif isinstance(raw, dict):
            value = normalize_skill_value(first_present(raw, SKILL_VALUE_FIELDS))
        else:
            continue
        entries.append(SkillEntry(name=str(name), value=value))
    return entries


def extract_skills(node: Any) -> list[SkillEntry]:
    """
    Skills matrix as (name, value) entries sorted by value descending.
    Accepts a list of skill objects or a name -> value/object map.
    Ties keep discovery order.
    """
    matrix = _find_skills_matrix(node)
    if isinstance(matrix, list):
        entries = _skills_from_list(matrix)
    elif isinstance(matrix, dict):
        entries = _skills_from_map(matrix)
    else:
        return []
    return sorted(entries, key=lambda e: e.value, reverse=True)


def extract_skills_error(node: Any) -> Optional[str]:
    """Upstream note explaining why the skills matrix is empty, if the backend sent one."""
    if not isinstance(node, dict):
        return None
    note = node.get("skillsError")
    if not isinstance(note, str) or not note.strip():
        return None
    return note.strip()
