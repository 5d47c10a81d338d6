"""
Incremental rating aggregation.

A prompt stores only its current average and the number of ratings behind
it. Each new or replaced rating folds into that pair without revisiting the
individual values:

    First rating:    n' = n + 1      total = avg * (n' - 1) + value
    Replacement:     n' = n          total = avg * n - old + value
    New average:     avg' = total / n'

An empty pair (n' == 0) averages to 0.0, and any non-finite result is
clamped to 0.0 so the stored average is always a bounded, finite number.
"""

import math
from typing import Optional, Tuple

MIN_RATING = 1
MAX_RATING = 5


def safe_average(total: float, count: int) -> float:
    """Divide total by count, returning 0.0 for an empty or non-finite result."""
    if count == 0:
        return 0.0
    avg = total / count
    if math.isfinite(avg):
        return avg
    return 0.0


def apply_rating(
    avg: float,
    count: int,
    value: int,
    previous: Optional[int] = None,
) -> Tuple[float, int]:
    """Fold one rating into an existing (average, count) pair.

    Args:
        avg: Current average before this rating.
        count: Number of ratings behind ``avg``.
        value: The rating being submitted.
        previous: The caller's earlier rating for the same prompt, if any.
            When given, ``value`` replaces it and the count is unchanged.

    Returns:
        The new (average, count) pair.
    """
    if previous is None:
        new_count = count + 1
        total = avg * (new_count - 1) + value
    else:
        new_count = count
        total = avg * count - previous + value
    return safe_average(total, new_count), new_count


def relevance_score(likes: int, purchases: int, rating: float) -> int:
    """Search ranking score: likes + purchases + floor(rating * 10)."""
    return likes + purchases + int(rating * 10.0)
