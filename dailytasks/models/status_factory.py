"""Today-status factory for dailytasks.

This module turns raw per-day readings (water glasses, protein grams,
workout/mental flags, meal-log count) into the TaskStatus snapshot the
recommendation engine consumes, applying fallback goals from configuration.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field

from dailytasks import config
from dailytasks.models.constants import GLASSES_PER_LITER
from dailytasks.models.task import TaskMeta, TaskStatus, TaskType


class DayReadings(BaseModel):
    """Raw readings for one user and one day."""

    water_glasses: Optional[float] = Field(None, ge=0.0, description="Glasses of water logged today")
    water_goal_liters: Optional[float] = Field(None, ge=0.0, description="Saved water goal in liters")
    protein_grams: Optional[float] = Field(None, ge=0.0, description="Protein grams logged today")
    protein_target_grams: Optional[float] = Field(None, ge=0.0, description="Protein target in grams")
    workout_completed: bool = Field(False, description="Workout done today")
    mental_completed: bool = Field(False, description="Mental session done today")
    meal_log_count: int = Field(0, ge=0, description="Number of meals logged today")


def create_status_defaults() -> Dict[TaskType, TaskStatus]:
    """Get the "not completed, empty meta" status for every task type.

    Returns:
        Dictionary with a default TaskStatus per task type, in catalog order
    """
    return {task_type: TaskStatus() for task_type in TaskType}


def liters_to_glasses(liters: float) -> int:
    """Convert a water goal in liters into 250 ml glasses."""
    return int(round(liters * GLASSES_PER_LITER))


def build_today_statuses(
    readings: DayReadings,
    protein_target_grams: Optional[float] = None,
    fallback_water_liters: Optional[float] = None,
) -> Dict[TaskType, TaskStatus]:
    """Build today's status snapshot from raw readings.

    Water and protein are completed when today's value reaches the goal;
    workout and mental mirror their flags; a meal counts as logged when at
    least one meal entry exists.

    Args:
        readings: Raw readings for the day
        protein_target_grams: Protein target used when the readings carry none
            (defaults to DAILY_TASKS_PROTEIN_TARGET_G)
        fallback_water_liters: Water goal used when the readings carry none
            (defaults to DAILY_TASKS_WATER_GOAL_LITERS)

    Returns:
        Dictionary of TaskStatus per task type
    """
    if protein_target_grams is None:
        protein_target_grams = config.DEFAULT_PROTEIN_TARGET_G
    if fallback_water_liters is None:
        fallback_water_liters = config.FALLBACK_WATER_GOAL_LITERS

    statuses = create_status_defaults()

    glasses = readings.water_glasses or 0.0
    goal_liters = readings.water_goal_liters if readings.water_goal_liters is not None else fallback_water_liters
    goal_glasses = liters_to_glasses(goal_liters)
    statuses[TaskType.WATER] = TaskStatus(
        completed=glasses >= goal_glasses,
        meta=TaskMeta(glasses=glasses, goal_glasses=goal_glasses),
    )

    protein = readings.protein_grams or 0.0
    target = readings.protein_target_grams if readings.protein_target_grams is not None else protein_target_grams
    statuses[TaskType.PROTEIN] = TaskStatus(
        completed=protein >= target,
        meta=TaskMeta(protein=protein, target=target),
    )

    statuses[TaskType.WORKOUT] = TaskStatus(completed=readings.workout_completed)
    statuses[TaskType.MENTAL] = TaskStatus(completed=readings.mental_completed)
    statuses[TaskType.MEAL] = TaskStatus(completed=readings.meal_log_count > 0)

    return statuses
