from __future__ import annotations

from ..core.constants import PERCENTAGE_PRECISION


def ratio_percentage(part: int, total: int) -> float:
    """part / total * 100 rounded for display; 0 when total is 0."""
    if total <= 0:
        return 0.0
    return round(part / total * 100, PERCENTAGE_PRECISION)
