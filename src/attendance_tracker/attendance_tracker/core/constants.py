"""Constants and defaults.

Note: Keep thresholds here to avoid magic numbers spread across code.
"""

GOOD_THRESHOLD = 75.0
WARNING_THRESHOLD = 60.0
PERCENTAGE_PRECISION = 2
DEFAULT_IDENTITY_HEADER = "X-Student-Id"
