"""Constants for dailytasks.

This module centralizes all magic numbers and default values used by the recommendation engine.
"""


# Score weights (sum to 1.0): urgency, habit correction, preference
GAP_WEIGHT = 0.45
HABIT_WEIGHT = 0.35
INTEREST_WEIGHT = 0.20

# Input defaults
DEFAULT_ADHERENCE = 0.5
INTEREST_BOOST = 0.2

# Penalties
SHOWN_PENALTY = 0.2
SHOWN_WINDOW_HOURS = 1.0
MIN_COOLDOWN_DIVISOR = 1.0

# Reason thresholds
GAP_FAR_THRESHOLD = 0.7
GAP_REMAINING_THRESHOLD = 0.3
HABIT_WEAK_THRESHOLD = 0.6
HABIT_IMPROVE_THRESHOLD = 0.3

# Today-status conversion
GLASSES_PER_LITER = 4  # 250 ml glasses
