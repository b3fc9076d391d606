"""Cross-board item merging for the Monday.com dashboard feed."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from relay_core.schemas import BoardItem

logger = logging.getLogger("relay-aggregation")


def merge_board_items(pages: Iterable[Iterable[Any]]) -> list[BoardItem]:
    """Concatenate per-board item pages and dedupe by item id.

    Pages are consumed in the order given. A later occurrence of an id
    replaces the earlier item (last write wins) but keeps the position at
    which that id was first seen.

    Args:
        pages: One item list per board, in board request order.

    Returns:
        Distinct items in first-insertion order.
    """
    seen: dict[Any, BoardItem] = {}
    for page in pages:
        for item in page:
            if not isinstance(item, Mapping):
                logger.warning(f"Skipping malformed board item: {item!r}")
                continue
            seen[_item_key(item)] = dict(item)
    return list(seen.values())


def _item_key(item: Mapping[str, Any]) -> tuple[Any, ...]:
    """Identity of an item for deduplication.

    Numbers compare by value (1 == 1.0) but never equal a boolean or a string.
    An explicit null id is not the same as a missing one. Container ids are
    only equal to themselves.
    """
    if "id" not in item:
        return ("undefined",)
    key = item["id"]
    if key is None:
        return ("null",)
    if isinstance(key, bool):
        return ("boolean", key)
    if isinstance(key, (int, float)):
        if key != key:
            return ("number", "NaN")
        return ("number", key)
    if isinstance(key, str):
        return ("string", key)
    return ("object", id(key))
