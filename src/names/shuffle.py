from __future__ import annotations

from typing import List, Optional, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


def shuffle_names(items: Sequence[T], rng: Optional[np.random.Generator] = None) -> List[T]:
    """Return a Fisher-Yates shuffled copy of ``items``; the input is left untouched."""
    if rng is None:
        rng = np.random.default_rng()

    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))  # uniform in [0, i]
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
