"""Environment configuration for dailytasks."""

import os
from dotenv import load_dotenv

load_dotenv()

# Recommendation defaults
DEFAULT_MAX_TASKS = int(os.getenv("DAILY_TASKS_MAX_TASKS", "3"))

# Fallback goals used when a user has none saved for today
DEFAULT_PROTEIN_TARGET_G = float(os.getenv("DAILY_TASKS_PROTEIN_TARGET_G", "150"))
FALLBACK_WATER_GOAL_LITERS = float(os.getenv("DAILY_TASKS_WATER_GOAL_LITERS", "2.0"))
