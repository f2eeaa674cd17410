"""Explicit positional ordering driven by ``order-N`` tags."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ContentSelection.shared.types import item_tags, parse_order_hint

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

logger = logging.getLogger(__name__)


def resolve_collision(existing: Any, incoming: Any) -> Any:
    """Pick the occupant of a position claimed by two items.

    The later item wins and the earlier one is dropped from the output.
    """
    return incoming


def find_order_hint(item: Any) -> int | None:
    """Position from the first order hint among the item's tags."""
    for tag in item_tags(item):
        position = parse_order_hint(tag)
        if position is not None:
            return position
    return None


class PositionTable:
    """Sparse mapping of non-negative positions to items."""

    def __init__(self) -> None:
        self._slots: dict[int, Any] = {}
        self.dropped = 0

    def place(self, position: int, item: Any) -> None:
        if position in self._slots:
            winner = resolve_collision(self._slots[position], item)
            self.dropped += 1
            logger.debug(
                "[CONTENT-SELECT] stage=order event=collision position=%d",
                position,
            )
            self._slots[position] = winner
        else:
            self._slots[position] = item

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[Any]:
        """Yield occupants in ascending position, skipping empty positions."""
        for position in sorted(self._slots):
            yield self._slots[position]


def order(selected: Sequence[Any]) -> list[Any]:
    """Place hinted items by position, then append unhinted ones."""
    table = PositionTable()
    unordered: list[Any] = []

    for item in selected:
        position = find_order_hint(item)
        if position is None:
            unordered.append(item)
        else:
            table.place(position, item)

    result = [*table, *unordered]
    logger.debug(
        "[CONTENT-SELECT] stage=order event=ordered positioned=%d "
        "unordered=%d dropped=%d",
        len(table),
        len(unordered),
        table.dropped,
    )
    return result
