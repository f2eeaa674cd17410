"""Fixtures for benchmark tests generating large synthetic item lists."""
from __future__ import annotations

import numpy as np
import pytest

TAG_POOL = ("news", "food", "store", "featured", "banner", "home", "notice")


@pytest.fixture
def make_tagged_items():
    """Factory fixture that generates items with random tags and order hints."""

    def _make(n: int, hint_ratio: float = 0.2, seed: int = 42) -> list[dict]:
        rng = np.random.RandomState(seed)
        items = []
        for i in range(n):
            n_tags = int(rng.randint(0, 4))
            tags = [str(t) for t in rng.choice(TAG_POOL, size=n_tags, replace=False)]
            if rng.rand() < hint_ratio:
                tags.append(f"order-{int(rng.randint(0, n))}")
            items.append({"id": i, "tags": tags})
        return items

    return _make
