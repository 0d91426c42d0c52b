"""Cache-related dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TrendingCategory(str, Enum):
    """TMDB trending aggregation window."""

    DAY = "day"
    WEEK = "week"


@dataclass(frozen=True)
class CacheEntry:
    """Cached upstream payload with the monotonic time it was stored."""

    updated_at: float
    data: Any
