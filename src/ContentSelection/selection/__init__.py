"""Selection bounded context: tag filtering and positional ordering."""

from ContentSelection.selection.filtering import matches_accept_tags, select
from ContentSelection.selection.ordering import (
    PositionTable,
    find_order_hint,
    order,
    resolve_collision,
)

__all__ = [
    "PositionTable",
    "find_order_hint",
    "matches_accept_tags",
    "order",
    "resolve_collision",
    "select",
]
