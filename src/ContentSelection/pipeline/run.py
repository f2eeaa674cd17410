"""Engine entry point: select, then optionally order."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ContentSelection.selection.filtering import select
from ContentSelection.selection.ordering import order
from ContentSelection.shared.config import FilterConfig

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def _as_config(config: FilterConfig | Mapping[str, Any] | None) -> FilterConfig:
    if isinstance(config, FilterConfig):
        return config
    return FilterConfig.from_mapping(config)


def run(
    items: Sequence[Any],
    config: FilterConfig | Mapping[str, Any] | None = None,
) -> list[Any]:
    """Run the selection pipeline over ``items``.

    ``config`` may be a FilterConfig or a plain settings mapping. Raises
    InvalidConfiguration when the settings are invalid; malformed items
    never raise.
    """
    cfg = _as_config(config)

    selected = select(items, cfg)
    result = order(selected) if cfg.ordered else selected

    logger.info(
        "[CONTENT-SELECT] stage=run event=complete total=%d selected=%d "
        "returned=%d ordered=%s",
        len(items),
        len(selected),
        len(result),
        cfg.ordered,
    )
    return result


def first_or_none(result: Sequence[Any]) -> Any | None:
    return result[0] if result else None


def run_singular(
    items: Sequence[Any],
    config: FilterConfig | Mapping[str, Any] | None = None,
) -> Any | None:
    """Run the pipeline and return only its first item, or None."""
    return first_or_none(run(items, config))
