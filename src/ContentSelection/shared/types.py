from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

ORDER_TAG_PREFIX = "order-"

_ORDER_HINT = re.compile(rf"{re.escape(ORDER_TAG_PREFIX)}([0-9]+)")


def item_tags(item: Any) -> tuple[str, ...]:
    """Read the tag collection of an item, mapping or object alike.

    Missing or ``None`` tags read as no tags. A bare string is a single tag.
    Non-string entries are skipped; order and duplicates are kept.
    """
    if isinstance(item, Mapping):
        raw = item.get("tags")
    else:
        raw = getattr(item, "tags", None)

    if raw is None:
        return ()
    if isinstance(raw, str):
        return (raw,)
    if not isinstance(raw, Iterable):
        return ()
    return tuple(t for t in raw if isinstance(t, str))


def parse_order_hint(tag: str) -> int | None:
    """Return N for a tag of the form ``order-N``, else None."""
    match = _ORDER_HINT.fullmatch(tag)
    if match is None:
        return None
    return int(match.group(1))
