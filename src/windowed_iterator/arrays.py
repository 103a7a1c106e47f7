"""numpy views of sliding windows over numeric sources."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from .windows import windows


def windows_array(samples: Iterable[float], window_size: int, dtype: np.dtype | type = float) -> np.ndarray:
    """Stack every window of ``samples`` into a ``(count, window_size)`` array."""

    rows = list(windows(samples, window_size))
    if not rows:
        return np.empty((0, window_size), dtype=dtype)
    return np.asarray(rows, dtype=dtype)
