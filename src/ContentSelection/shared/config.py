from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from ContentSelection.pipeline.errors import InvalidConfiguration

# Settings keys recognized by FilterConfig.from_mapping, canonical name first.
_MAX_COUNT_KEYS = ("maxCount", "max_count", "maxPosts")
_ACCEPT_TAGS_KEYS = ("acceptTags", "accept_tags", "postTags")
_STRICT_KEYS = ("strict", "strictTags")
_ORDERED_KEYS = ("ordered",)


def _normalize_accept_tags(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = (value,)
    elif not isinstance(value, Iterable):
        raise InvalidConfiguration(
            f"accept_tags must be a string or a sequence of strings, "
            f"got {type(value).__name__}"
        )
    tags = tuple(t for t in value if isinstance(t, str))
    # A list holding only empty strings means no accept tags.
    return tags if any(tags) else ()


def _first_present(settings: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in settings:
            return settings[key]
    return None


@dataclass(frozen=True)
class FilterConfig:
    """Declarative selection settings for a single engine call.

    ``accept_tags`` is normalized on construction: a single string becomes a
    one-element tuple and a collection of only empty strings becomes empty,
    so the selector only ever sees a (possibly empty) tuple of tags. ``max_count`` must be a
    non-negative integer or None.
    """

    max_count: int | None = None
    accept_tags: tuple[str, ...] = ()
    strict: bool = False
    ordered: bool = False

    def __post_init__(self) -> None:
        if self.max_count is not None:
            if isinstance(self.max_count, bool) or not isinstance(
                self.max_count, int
            ):
                raise InvalidConfiguration(
                    f"max_count must be an integer, got {self.max_count!r}"
                )
            if self.max_count < 0:
                raise InvalidConfiguration(
                    f"max_count must not be negative, got {self.max_count}"
                )
        object.__setattr__(
            self, "accept_tags", _normalize_accept_tags(self.accept_tags)
        )
        object.__setattr__(self, "strict", bool(self.strict))
        object.__setattr__(self, "ordered", bool(self.ordered))

    @property
    def has_accept_tags(self) -> bool:
        return bool(self.accept_tags)

    @classmethod
    def from_mapping(cls, settings: Mapping[str, Any] | None) -> FilterConfig:
        """Build a config from a settings mapping, ignoring unknown keys."""
        settings = settings or {}
        return cls(
            max_count=_first_present(settings, _MAX_COUNT_KEYS),
            accept_tags=_first_present(settings, _ACCEPT_TAGS_KEYS),
            strict=bool(_first_present(settings, _STRICT_KEYS)),
            ordered=bool(_first_present(settings, _ORDERED_KEYS)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "maxCount": self.max_count,
            "acceptTags": list(self.accept_tags),
            "strict": self.strict,
            "ordered": self.ordered,
        }


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class CliDefaults:
    """Defaults for the ``content-select`` CLI, taken from the environment."""

    max_count: int | None = None
    strict: bool = False
    ordered: bool = False

    @classmethod
    def from_env(cls) -> CliDefaults:
        raw_max = os.environ.get("CONTENT_SELECT_MAX_COUNT", "").strip()
        try:
            max_count = int(raw_max) if raw_max else None
        except ValueError as exc:
            raise InvalidConfiguration(
                f"CONTENT_SELECT_MAX_COUNT must be an integer, got {raw_max!r}"
            ) from exc
        return cls(
            max_count=max_count,
            strict=_env_flag("CONTENT_SELECT_STRICT"),
            ordered=_env_flag("CONTENT_SELECT_ORDERED"),
        )
