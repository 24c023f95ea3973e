"""Recommendation engine for dailytasks."""

from dailytasks.engine.catalog import TASK_CATALOG, get_task_definition
from dailytasks.engine.inputs import normalize_inputs, RecommendationInputs
from dailytasks.engine.scoring import score_task, parse_timestamp
from dailytasks.engine.ranking import generate_recommendations
from dailytasks.engine.history import record_shown, record_completed

__all__ = [
    "TASK_CATALOG",
    "get_task_definition",
    "normalize_inputs",
    "RecommendationInputs",
    "score_task",
    "parse_timestamp",
    "generate_recommendations",
    "record_shown",
    "record_completed",
]
