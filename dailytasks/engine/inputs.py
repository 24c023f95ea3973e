"""Input normalization for the recommendation engine.

Every "missing -> neutral/zero" rule lives here, so scoring helpers can
assume a complete, well-typed input bundle.
"""

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import Any, Dict, FrozenSet, Optional

from pydantic import BaseModel, Field, ValidationError

from dailytasks import config
from dailytasks.engine.catalog import TASK_CATALOG, to_task_type
from dailytasks.models.constants import DEFAULT_ADHERENCE
from dailytasks.models.task import HistoryEntry, TaskStatus, TaskType

logger = logging.getLogger(__name__)


class RecommendationInputs(BaseModel):
    """Fully defaulted input bundle, one entry per catalog type."""

    statuses: Dict[TaskType, TaskStatus] = Field(..., description="Today's status for every catalog type")
    habits: Dict[TaskType, float] = Field(..., description="Adherence in [0, 1] for every catalog type")
    interests: FrozenSet[TaskType] = Field(default_factory=frozenset, description="Preferred task types")
    history: Dict[TaskType, HistoryEntry] = Field(..., description="History for every catalog type")
    max_tasks: int = Field(..., ge=0, description="Maximum number of results")
    now: datetime = Field(..., description="Single clock sample for the whole call")


def ensure_utc(moment: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def _iter_known(mapping: Any, label: str):
    if not isinstance(mapping, Mapping):
        if mapping is not None:
            logger.debug(f"Ignoring {label}: expected a mapping, got {type(mapping).__name__}")
        return
    for key, value in mapping.items():
        task_type = to_task_type(key)
        if task_type is None:
            logger.debug(f"Ignoring unknown task type in {label}: {key!r}")
            continue
        yield task_type, value


def normalize_statuses(statuses: Any) -> Dict[TaskType, TaskStatus]:
    """Build a status for every catalog type, defaulting to not completed."""
    normalized = {task_type: TaskStatus() for task_type in TASK_CATALOG}
    for task_type, value in _iter_known(statuses, "statuses"):
        if isinstance(value, TaskStatus):
            normalized[task_type] = value
        elif isinstance(value, Mapping):
            try:
                normalized[task_type] = TaskStatus.model_validate(value)
            except ValidationError as e:
                logger.debug(f"Malformed status for {task_type.value}, using default: {e.error_count()} errors")
    return normalized


def normalize_adherence(value: Any) -> float:
    """Coerce an adherence value into [0, 1], falling back to neutral."""
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value != value:
        return DEFAULT_ADHERENCE
    return min(1.0, max(0.0, float(value)))


def normalize_habits(habits: Any) -> Dict[TaskType, float]:
    normalized = {task_type: DEFAULT_ADHERENCE for task_type in TASK_CATALOG}
    for task_type, value in _iter_known(habits, "habits"):
        normalized[task_type] = normalize_adherence(value)
    return normalized


def normalize_interests(interests: Any) -> FrozenSet[TaskType]:
    if interests is None:
        return frozenset()
    if isinstance(interests, str):
        interests = [interests]
    if not isinstance(interests, Iterable):
        logger.debug(f"Ignoring interests: expected an iterable, got {type(interests).__name__}")
        return frozenset()
    resolved = set()
    for item in interests:
        task_type = to_task_type(item)
        if task_type is None:
            logger.debug(f"Ignoring unknown interest: {item!r}")
            continue
        resolved.add(task_type)
    return frozenset(resolved)


def normalize_history(history: Any) -> Dict[TaskType, HistoryEntry]:
    normalized = {task_type: HistoryEntry() for task_type in TASK_CATALOG}
    for task_type, value in _iter_known(history, "history"):
        if isinstance(value, HistoryEntry):
            normalized[task_type] = value
        elif isinstance(value, Mapping):
            normalized[task_type] = HistoryEntry.model_validate(value)
    return normalized


def normalize_max_tasks(max_tasks: Any) -> int:
    if max_tasks is None or isinstance(max_tasks, bool):
        return config.DEFAULT_MAX_TASKS
    try:
        return max(0, int(max_tasks))
    except (TypeError, ValueError, OverflowError):
        logger.debug(f"Invalid max_tasks {max_tasks!r}, using default {config.DEFAULT_MAX_TASKS}")
        return config.DEFAULT_MAX_TASKS


def normalize_inputs(
    statuses: Any,
    interests: Any = None,
    habits: Any = None,
    history: Any = None,
    max_tasks: Any = None,
    now: Optional[datetime] = None,
) -> RecommendationInputs:
    """Apply every default to a caller-supplied input bundle.

    Never raises: unknown task types are dropped, malformed values fall back
    to their neutral default.

    Args:
        statuses: Mapping of task type -> TaskStatus (or dict)
        interests: Iterable of preferred task types
        habits: Mapping of task type -> adherence in [0, 1]
        history: Mapping of task type -> HistoryEntry (or dict)
        max_tasks: Maximum number of results (defaults to configuration)
        now: Current instant (defaults to current UTC time)

    Returns:
        RecommendationInputs with an entry for every catalog type
    """
    if not isinstance(now, datetime):
        now = datetime.now(timezone.utc)

    return RecommendationInputs(
        statuses=normalize_statuses(statuses),
        habits=normalize_habits(habits),
        interests=normalize_interests(interests),
        history=normalize_history(history),
        max_tasks=normalize_max_tasks(max_tasks),
        now=ensure_utc(now),
    )
