"""Data models for dailytasks."""

from dailytasks.models.task import (
    TaskType,
    TaskDefinition,
    TaskMeta,
    TaskStatus,
    HistoryEntry,
    ScoreFactors,
    ScoredCandidate,
    RecommendationResult,
)
from dailytasks.models.status_factory import DayReadings, build_today_statuses, create_status_defaults

__all__ = [
    "TaskType",
    "TaskDefinition",
    "TaskMeta",
    "TaskStatus",
    "HistoryEntry",
    "ScoreFactors",
    "ScoredCandidate",
    "RecommendationResult",
    "DayReadings",
    "build_today_statuses",
    "create_status_defaults",
]
