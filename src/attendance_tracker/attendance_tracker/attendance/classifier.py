from __future__ import annotations

from dataclasses import dataclass

from ..common.validators import require_percentage
from ..core.constants import GOOD_THRESHOLD, WARNING_THRESHOLD
from ..core.enums import RiskTier


@dataclass(frozen=True)
class RiskTierClassifier:
    """Map an attendance percentage to a risk tier.

    Lower bounds are inclusive: exactly 75 is Good, exactly 60 is Warning.
    """

    good_threshold: float = GOOD_THRESHOLD
    warning_threshold: float = WARNING_THRESHOLD

    def classify(self, percentage: float) -> RiskTier:
        value = require_percentage(percentage)
        if value >= self.good_threshold:
            return RiskTier.GOOD
        if value >= self.warning_threshold:
            return RiskTier.WARNING
        return RiskTier.CRITICAL
