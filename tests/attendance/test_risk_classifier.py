import pytest

from src.attendance_tracker.attendance_tracker.attendance.classifier import RiskTierClassifier
from src.attendance_tracker.attendance_tracker.core.enums import RiskTier
from src.attendance_tracker.attendance_tracker.core.exceptions import ValidationError


@pytest.mark.parametrize(
    "percentage, tier",
    [
        (100, RiskTier.GOOD),
        (75, RiskTier.GOOD),
        (74.999, RiskTier.WARNING),
        (60, RiskTier.WARNING),
        (59.999, RiskTier.CRITICAL),
        (0, RiskTier.CRITICAL),
    ],
)
def test_thresholds_are_inclusive_lower_bounds(percentage, tier):
    assert RiskTierClassifier().classify(percentage) == tier


@pytest.mark.parametrize("percentage", [-0.01, 100.5, float("nan"), "80", None, True])
def test_out_of_range_or_non_numeric_is_rejected(percentage):
    with pytest.raises(ValidationError):
        RiskTierClassifier().classify(percentage)


def test_custom_thresholds():
    classifier = RiskTierClassifier(good_threshold=90, warning_threshold=80)
    assert classifier.classify(85) == RiskTier.WARNING
    assert classifier.classify(79) == RiskTier.CRITICAL
