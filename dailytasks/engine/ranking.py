"""Recommendation ranking for dailytasks.

Scores the whole catalog, sorts by score (highest first) and returns the
top incomplete tasks. Ties keep catalog order, so the same inputs always
produce the same ordering.
"""

import logging
from datetime import datetime
from typing import Any, List, Optional

from dailytasks.engine.catalog import TASK_CATALOG
from dailytasks.engine.inputs import RecommendationInputs, normalize_inputs
from dailytasks.engine.scoring import score_task
from dailytasks.models.task import RecommendationResult, ScoredCandidate

logger = logging.getLogger(__name__)


def score_catalog(inputs: RecommendationInputs) -> List[ScoredCandidate]:
    """Score every catalog task, in catalog order."""
    candidates = []
    for task_type, definition in TASK_CATALOG.items():
        score, reason, factors = score_task(task_type, inputs)
        candidates.append(
            ScoredCandidate(
                id=task_type,
                title=definition.title,
                completed=inputs.statuses[task_type].completed,
                score=score,
                reason=reason,
                factors=factors,
            )
        )
    return candidates


def rank_candidates(candidates: List[ScoredCandidate]) -> List[ScoredCandidate]:
    """Sort candidates by score, highest first.

    ``sorted`` is stable, so equal scores keep their incoming (catalog) order.
    """
    return sorted(candidates, key=lambda c: -c.score)


def generate_recommendations(
    statuses: Any,
    interests: Any = None,
    habits: Any = None,
    history: Any = None,
    max_tasks: Any = None,
    now: Optional[datetime] = None,
) -> RecommendationResult:
    """Rank the daily task catalog for a user.

    This function is deterministic for a given ``now`` and never raises:
    missing or malformed optional inputs fall back to neutral defaults.

    Args:
        statuses: Today's TaskStatus per task type (missing types count as not completed)
        interests: Task types the user prefers
        habits: Adherence in [0, 1] per task type (missing -> 0.5)
        history: HistoryEntry per task type (missing -> no penalty)
        max_tasks: Maximum number of results (defaults to DAILY_TASKS_MAX_TASKS)
        now: Current instant, sampled once for the whole call

    Returns:
        RecommendationResult with ``all`` (every catalog task, ranked) and
        ``results`` (incomplete tasks only, truncated to max_tasks)
    """
    inputs = normalize_inputs(
        statuses,
        interests=interests,
        habits=habits,
        history=history,
        max_tasks=max_tasks,
        now=now,
    )

    ranked = rank_candidates(score_catalog(inputs))
    results = [c for c in ranked if not c.completed][: inputs.max_tasks]

    logger.debug(
        f"Recommended {[c.id.value for c in results]} "
        f"(max_tasks={inputs.max_tasks}, incomplete={sum(1 for c in ranked if not c.completed)})"
    )
    return RecommendationResult(results=results, all=ranked)
