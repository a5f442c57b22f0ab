"""
Pure state logic for the navigation tree.

The expansion set is an ordered list of group ids with set semantics for
membership. Nothing here touches a surface or storage; the controller
composes these functions with its side effects.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Iterable, List, Optional

from .protocols import StructuralLookup

logger = logging.getLogger(__name__)


def parse_expanded_groups(raw: Optional[str]) -> Optional[List[str]]:
    """Decode a persisted expansion set.

    Returns None when the value is absent or is not a JSON array of
    strings, so callers can fall back to the default seed.
    """
    if raw is None:
        return None
    try:
        value = json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        logger.debug("Expanded groups value is not JSON: %r", raw)
        return None
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        logger.debug("Expanded groups value has the wrong shape: %r", value)
        return None
    return dedupe(value)


def serialize_expanded_groups(groups: Iterable[str]) -> str:
    """Encode an expansion set for storage."""
    return json.dumps(list(groups))


def parse_scroll_position(raw: Optional[str]) -> Optional[float]:
    """Decode a persisted scroll offset; None unless it is a finite number >= 0."""
    if raw is None:
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if math.isnan(value) or math.isinf(value) or value < 0:
        return None
    return value


def serialize_scroll_position(offset: float) -> str:
    """Encode a scroll offset, dropping a redundant trailing .0."""
    if float(offset).is_integer():
        return str(int(offset))
    return str(offset)


def dedupe(groups: Iterable[str]) -> List[str]:
    """Drop repeated ids, keeping first occurrences in order."""
    seen = set()
    result = []
    for group_id in groups:
        if group_id not in seen:
            seen.add(group_id)
            result.append(group_id)
    return result


def seed_expanded_groups(
    persisted: Optional[List[str]], first_group_id: Optional[str]
) -> List[str]:
    """Apply the default-seed rule.

    A persisted set that is absent, empty or lacks the first top-level
    group is replaced with exactly that group. Without a first group the
    persisted set is kept as is (or empty).
    """
    if first_group_id is None:
        return list(persisted or [])
    if not persisted or first_group_id not in persisted:
        return [first_group_id]
    return list(persisted)


def toggle_group(groups: List[str], group_id: str) -> List[str]:
    """Return a new set with group_id's membership flipped.

    Removal keeps the order of the remaining ids; insertion appends.
    """
    if group_id in groups:
        return [g for g in groups if g != group_id]
    return [*groups, group_id]


def ensure_groups(groups: List[str], group_ids: Iterable[str]) -> List[str]:
    """Return a new set with every id in group_ids present, appending missing ones."""
    result = list(groups)
    for group_id in group_ids:
        if group_id not in result:
            result.append(group_id)
    return result


def ancestors_of(node_id: str, lookup: StructuralLookup) -> List[str]:
    """Enclosing group ids of node_id, innermost first.

    The node itself is not included. The walk ends at a root or when a
    group repeats, so a malformed structure cannot loop forever.
    """
    ancestors: List[str] = []
    seen = {node_id}
    current = lookup.parent_group_of(node_id)
    while current is not None and current not in seen:
        ancestors.append(current)
        seen.add(current)
        current = lookup.parent_group_of(current)
    if current is not None:
        logger.warning("Cycle in navigation structure at group %r", current)
    return ancestors
