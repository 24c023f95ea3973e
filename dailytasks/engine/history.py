"""History bookkeeping helpers for dailytasks.

The engine never mutates history. Callers use these helpers after acting on
a recommendation to get an updated map for the next call.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional, Union

from dailytasks.engine.catalog import to_task_type
from dailytasks.engine.inputs import ensure_utc, normalize_history
from dailytasks.models.task import HistoryEntry, TaskType

logger = logging.getLogger(__name__)


def _stamp(
    history: Any,
    task_ids: Iterable[Union[TaskType, str]],
    field: str,
    now: Optional[datetime],
) -> Dict[TaskType, HistoryEntry]:
    moment = ensure_utc(now) if now is not None else datetime.now(timezone.utc)
    updated = normalize_history(history)
    for task_id in task_ids:
        task_type = to_task_type(task_id)
        if task_type is None:
            logger.debug(f"Ignoring unknown task type in history update: {task_id!r}")
            continue
        updated[task_type] = updated[task_type].model_copy(update={field: moment})
    return updated


def record_shown(
    history: Any,
    task_ids: Iterable[Union[TaskType, str]],
    now: Optional[datetime] = None,
) -> Dict[TaskType, HistoryEntry]:
    """Return a copy of history with last_shown_at set for the given tasks.

    Args:
        history: Existing history map (not modified)
        task_ids: Task types that were just shown to the user
        now: When they were shown (defaults to current UTC time)

    Returns:
        New history map with an entry for every catalog type
    """
    return _stamp(history, task_ids, "last_shown_at", now)


def record_completed(
    history: Any,
    task_id: Union[TaskType, str],
    now: Optional[datetime] = None,
) -> Dict[TaskType, HistoryEntry]:
    """Return a copy of history with last_completed_at set for one task."""
    return _stamp(history, [task_id], "last_completed_at", now)
