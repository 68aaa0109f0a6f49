"""Schema-less traversal of untyped JSON: breadth-first key search and envelope unwrapping."""

import logging
from collections import deque
from typing import Any, Callable, Iterator

logger = logging.getLogger(__name__)

Matcher = Callable[[str, Any], bool]

# Bound on repeated {"data": {...}} wrappers; also stops self-referential envelopes
MAX_ENVELOPE_DEPTH = 5


def is_container(value: Any) -> bool:
    """True for JSON objects and arrays, the only nodes the search descends into."""
    return isinstance(value, (dict, list))


def _items(node: Any) -> Iterator[tuple[str, Any]]:
    """Key/value pairs in declaration order; array entries keyed by their index."""
    if isinstance(node, dict):
        for key, value in node.items():
            yield str(key), value
    else:
        for index, value in enumerate(node):
            yield str(index), value


def pick_deep(node: Any, matcher: Matcher, default: Any = None) -> Any:
    """
    Breadth-first search for the first (key, value) pair accepted by matcher.
    Within a node, pairs are tried in declaration order; the search stops at the
    first match. Nodes are tracked by identity so cyclic graphs terminate.
    Returns the matched value, or default when nothing matches.
    """
    if not is_container(node):
        return default

    queue: deque[Any] = deque([node])
    seen: set[int] = {id(node)}

    while queue:
        current = queue.popleft()
        for key, value in _items(current):
            if matcher(key, value):
                return value
            if is_container(value) and id(value) not in seen:
                seen.add(id(value))
                queue.append(value)

    logger.debug("pick_deep: no match in %d node(s)", len(seen))
    return default


def unwrap_envelope(node: Any, max_depth: int = MAX_ENVELOPE_DEPTH) -> Any:
    """Descend through nested `data` objects, at most max_depth levels."""
    for _ in range(max_depth):
        if isinstance(node, dict) and isinstance(node.get("data"), dict):
            node = node["data"]
        else:
            break
    return node
