"""dailytasks: daily task recommendation engine."""

from dailytasks.engine import generate_recommendations
from dailytasks.models import TaskType, TaskStatus, RecommendationResult

__all__ = [
    "generate_recommendations",
    "TaskType",
    "TaskStatus",
    "RecommendationResult",
]
