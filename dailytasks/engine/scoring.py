"""Scoring logic for dailytasks.

Each catalog task gets a score built from three positive factors and two
penalties:

    score = base_weight * (0.45 * gap + 0.35 * habit_need + 0.20 * interest_boost)
            - (cooldown_penalty + shown_penalty)

All helpers are pure. They expect a normalized input bundle (see
``dailytasks.engine.inputs``) and never raise.
"""

import logging
from datetime import datetime
from typing import FrozenSet, Optional, Tuple, Union

from dailytasks.engine.catalog import TASK_CATALOG
from dailytasks.engine.inputs import RecommendationInputs, ensure_utc
from dailytasks.models.constants import (
    GAP_WEIGHT,
    HABIT_WEIGHT,
    INTEREST_WEIGHT,
    INTEREST_BOOST,
    SHOWN_PENALTY,
    SHOWN_WINDOW_HOURS,
    MIN_COOLDOWN_DIVISOR,
    GAP_FAR_THRESHOLD,
    GAP_REMAINING_THRESHOLD,
    HABIT_WEAK_THRESHOLD,
    HABIT_IMPROVE_THRESHOLD,
)
from dailytasks.models.task import HistoryEntry, ScoreFactors, TaskStatus, TaskType

logger = logging.getLogger(__name__)

SECONDS_PER_HOUR = 3600.0


def _ratio(value: Optional[float], goal: Optional[float]) -> float:
    if goal is None or goal <= 0:
        # Goal not configured: no progress, never a division by zero
        return 0.0
    return min(1.0, max(0.0, (value or 0.0) / goal))


def compute_progress(task_type: TaskType, status: TaskStatus) -> float:
    """Get today's progress for a task in [0, 1].

    Water and protein use their numeric meta; binary tasks are 1 when
    completed, else 0.

    Args:
        task_type: Task type being scored
        status: Today's status for that type

    Returns:
        Progress in [0, 1]
    """
    if task_type == TaskType.WATER:
        return _ratio(status.meta.glasses, status.meta.goal_glasses)
    if task_type == TaskType.PROTEIN:
        return _ratio(status.meta.protein, status.meta.target)
    return 1.0 if status.completed else 0.0


def compute_goal_gap(task_type: TaskType, status: TaskStatus) -> float:
    """Remaining urgency: 1 means not started, 0 means done."""
    return 1.0 - compute_progress(task_type, status)


def compute_habit_need(adherence: float) -> float:
    """Lower historical adherence gives higher need."""
    return 1.0 - adherence


def compute_interest_boost(task_type: TaskType, interests: FrozenSet[TaskType]) -> float:
    return INTEREST_BOOST if task_type in interests else 0.0


def parse_timestamp(value: Union[datetime, str, None]) -> Optional[datetime]:
    """Parse a history timestamp.

    Accepts datetimes and ISO-8601 strings (a trailing ``Z`` is read as UTC).
    Naive values are treated as UTC.

    Args:
        value: Raw timestamp from a HistoryEntry

    Returns:
        Timezone-aware datetime, or None if the value is absent or malformed
    """
    if isinstance(value, datetime):
        return ensure_utc(value)
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return ensure_utc(datetime.fromisoformat(text))
    except ValueError:
        logger.debug(f"Unparseable history timestamp: {value!r}")
        return None


def hours_since(value: Union[datetime, str, None], now: datetime) -> Optional[float]:
    """Elapsed hours between a history timestamp and now (None if unknown)."""
    moment = parse_timestamp(value)
    if moment is None:
        return None
    return (now - moment).total_seconds() / SECONDS_PER_HOUR


def cooldown_penalty(task_type: TaskType, entry: HistoryEntry, now: datetime) -> float:
    """Penalty for a task completed within its cooldown window.

    Decays linearly from 1 to 0 across the cooldown window.

    Args:
        task_type: Task type being scored
        entry: History for that type
        now: Clock sample for the current call

    Returns:
        Penalty >= 0 (0 when there is no valid completion timestamp)
    """
    elapsed = hours_since(entry.last_completed_at, now)
    if elapsed is None:
        return 0.0
    # Future timestamps count as just completed
    elapsed = max(0.0, elapsed)
    cooldown = TASK_CATALOG[task_type].cooldown_hours
    if elapsed >= cooldown:
        return 0.0
    return (cooldown - elapsed) / max(MIN_COOLDOWN_DIVISOR, cooldown)


def shown_penalty(entry: HistoryEntry, now: datetime) -> float:
    """Flat penalty for a task suggested within the last hour."""
    elapsed = hours_since(entry.last_shown_at, now)
    if elapsed is None:
        return 0.0
    return SHOWN_PENALTY if elapsed < SHOWN_WINDOW_HOURS else 0.0


def compute_factors(task_type: TaskType, inputs: RecommendationInputs) -> ScoreFactors:
    """Compute every intermediate scoring value for a task type."""
    entry = inputs.history[task_type]
    return ScoreFactors(
        gap=compute_goal_gap(task_type, inputs.statuses[task_type]),
        habit_need=compute_habit_need(inputs.habits[task_type]),
        interest_boost=compute_interest_boost(task_type, inputs.interests),
        cooldown_penalty=cooldown_penalty(task_type, entry, inputs.now),
        shown_penalty=shown_penalty(entry, inputs.now),
    )


def build_reason(factors: ScoreFactors) -> str:
    """Human-readable summary of the dominant factors (not used for ranking)."""
    if factors.gap > GAP_FAR_THRESHOLD:
        progress = "far from goal"
    elif factors.gap > GAP_REMAINING_THRESHOLD:
        progress = "progress remaining"
    else:
        progress = "almost done"

    if factors.habit_need > HABIT_WEAK_THRESHOLD:
        habit = "weak habit"
    elif factors.habit_need > HABIT_IMPROVE_THRESHOLD:
        habit = "could improve"
    else:
        habit = "solid habit"

    parts = [progress, habit]
    if factors.interest_boost > 0:
        parts.append("matches interests")
    if factors.penalty > 0:
        parts.append("cooldown/duplicate")
    return ", ".join(parts)


def score_task(task_type: TaskType, inputs: RecommendationInputs) -> Tuple[float, str, ScoreFactors]:
    """Score one catalog task.

    Args:
        task_type: Task type to score
        inputs: Normalized input bundle

    Returns:
        Tuple of (score, reason, factors)
    """
    factors = compute_factors(task_type, inputs)
    weighted = (
        GAP_WEIGHT * factors.gap
        + HABIT_WEIGHT * factors.habit_need
        + INTEREST_WEIGHT * factors.interest_boost
    )
    score = TASK_CATALOG[task_type].base_weight * weighted - factors.penalty
    return score, build_reason(factors), factors
