"""JSON file boundary for the CLI: items in, selection report out."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ContentSelection.pipeline.errors import ArtifactError
from ContentSelection.shared.config import FilterConfig

logger = logging.getLogger(__name__)

# Keys accepted for the item array when the items file holds an object.
_ITEM_ARRAY_KEYS = ("items", "posts")


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise ArtifactError(f"File not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ArtifactError(f"Cannot read {path}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ArtifactError(f"Invalid JSON in {path}: {exc}") from exc


def load_items(path: Path) -> list[Any]:
    """Load candidate items from a JSON array or an ``{"items": [...]}`` object."""
    raw = _read_json(path)
    if isinstance(raw, dict):
        for key in _ITEM_ARRAY_KEYS:
            if key in raw:
                raw = raw[key]
                break
    if not isinstance(raw, list):
        raise ArtifactError(
            f"Expected a JSON array of items in {path}, "
            f"got {type(raw).__name__}"
        )
    logger.info(
        "[CONTENT-SELECT] stage=load event=items_loaded path=%s items=%d",
        path,
        len(raw),
    )
    return raw


def load_settings(path: Path) -> FilterConfig:
    """Load a FilterConfig from a JSON settings object."""
    raw = _read_json(path)
    if not isinstance(raw, dict):
        raise ArtifactError(
            f"Expected a JSON object of settings in {path}, "
            f"got {type(raw).__name__}"
        )
    return FilterConfig.from_mapping(raw)


@dataclass(frozen=True)
class SelectionReport:
    """Output of one CLI selection run."""

    config: FilterConfig
    total_items: int
    items: tuple[Any, ...]

    @property
    def selected_items(self) -> int:
        return len(self.items)

    def to_json(self, path: Path) -> None:
        data = {
            "config": self.config.to_dict(),
            "total_items": self.total_items,
            "selected_items": self.selected_items,
            "items": list(self.items),
        }
        path.write_text(json.dumps(data, indent=2))

    @classmethod
    def from_json(cls, path: Path) -> SelectionReport:
        data = _read_json(path)
        if not isinstance(data, dict) or not isinstance(data.get("items"), list):
            raise ArtifactError(
                f"Expected a report object with an \"items\" array in {path}"
            )
        return cls(
            config=FilterConfig.from_mapping(data.get("config", {})),
            total_items=data.get("total_items", len(data["items"])),
            items=tuple(data["items"]),
        )
