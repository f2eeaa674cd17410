"""Tag- and count-based selection of candidate items."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ContentSelection.shared.types import item_tags

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ContentSelection.shared.config import FilterConfig

logger = logging.getLogger(__name__)


def matches_accept_tags(
    tags: Sequence[str],
    accept_tags: Sequence[str],
    strict: bool = False,
) -> bool:
    """Any-of match, or all-of match when ``strict`` is set."""
    present = frozenset(tags)
    if strict:
        return all(tag in present for tag in accept_tags)
    return any(tag in present for tag in accept_tags)


def select(items: Sequence[Any], config: FilterConfig) -> list[Any]:
    """Return the items included by ``config``, in input order.

    With accept tags, an item is included when it matches them and fewer
    than ``max_count`` items have been included so far. Without accept
    tags, ``max_count`` keeps the leading items and an unset ``max_count``
    keeps everything.
    """
    limit = config.max_count

    if config.has_accept_tags:
        selected: list[Any] = []
        for item in items:
            if limit is not None and len(selected) >= limit:
                break
            if matches_accept_tags(
                item_tags(item), config.accept_tags, config.strict
            ):
                selected.append(item)
        branch = "strict_tags" if config.strict else "any_tags"
    elif limit is not None:
        selected = list(items[:limit])
        branch = "max_count"
    else:
        selected = list(items)
        branch = "passthrough"

    logger.debug(
        "[CONTENT-SELECT] stage=select event=filtered branch=%s "
        "total=%d selected=%d",
        branch,
        len(items),
        len(selected),
    )
    return selected
