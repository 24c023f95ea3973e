"""Daily task data models for dailytasks."""

import math
from collections.abc import Mapping
from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, field_validator


class TaskType(str, Enum):
    """Task type enumeration (catalog order)."""
    WATER = "water"
    PROTEIN = "protein"
    WORKOUT = "workout"
    MENTAL = "mental"
    MEAL = "meal"


class TaskDefinition(BaseModel):
    """Static catalog entry for a task type."""

    title: str = Field(..., description="Display title")
    base_weight: float = Field(..., gt=0.0, description="Relative importance multiplier")
    cooldown_hours: float = Field(..., ge=0.0, description="Hours after completion before full re-suggestion")

    class Config:
        """Pydantic configuration."""
        frozen = True


class TaskMeta(BaseModel):
    """Numeric progress for goal-based task types."""

    glasses: Optional[float] = Field(None, description="Water glasses consumed today")
    goal_glasses: Optional[float] = Field(None, alias="goalGlasses", description="Daily water goal in glasses")
    protein: Optional[float] = Field(None, description="Protein grams consumed today")
    target: Optional[float] = Field(None, description="Daily protein target in grams")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True

    @field_validator("glasses", "goal_glasses", "protein", "target", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> Optional[float]:
        # Anything that is not a non-negative number counts as "not recorded"
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        if not math.isfinite(value) or value < 0:
            return None
        return float(value)


class TaskStatus(BaseModel):
    """Today's completion status for one task type."""

    completed: bool = Field(False, description="Whether the task is done today")
    meta: TaskMeta = Field(default_factory=TaskMeta, description="Numeric progress (water/protein only)")

    @field_validator("completed", mode="before")
    @classmethod
    def _truthy_completed(cls, value: Any) -> bool:
        return bool(value)

    @field_validator("meta", mode="before")
    @classmethod
    def _default_meta(cls, value: Any) -> Any:
        # Unusable meta means no recorded progress, not an invalid status
        if isinstance(value, (TaskMeta, Mapping)):
            return value
        return {}


class HistoryEntry(BaseModel):
    """Last completion / last suggestion instants for one task type.

    Datetimes and ISO-8601 strings are kept as supplied; numbers are read as
    epoch milliseconds. Strings are only interpreted when penalties are
    computed, so a malformed value never fails validation here.
    """

    last_completed_at: Optional[Union[datetime, str]] = Field(
        None, alias="lastCompletedAt", description="When the task was last completed"
    )
    last_shown_at: Optional[Union[datetime, str]] = Field(
        None, alias="lastShownAt", description="When the task was last suggested"
    )

    class Config:
        """Pydantic configuration."""
        populate_by_name = True

    @field_validator("last_completed_at", "last_shown_at", mode="before")
    @classmethod
    def _keep_supported(cls, value: Any) -> Optional[Union[datetime, str]]:
        if isinstance(value, (datetime, str)):
            return value
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
            return None
        try:
            return datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None


class ScoreFactors(BaseModel):
    """Intermediate values the score and reason are derived from."""

    gap: float = Field(..., ge=0.0, le=1.0, description="1 - progress")
    habit_need: float = Field(..., ge=0.0, le=1.0, description="1 - adherence")
    interest_boost: float = Field(0.0, ge=0.0, description="Flat bonus for interest match")
    cooldown_penalty: float = Field(0.0, ge=0.0, description="Decaying post-completion penalty")
    shown_penalty: float = Field(0.0, ge=0.0, description="Recently-suggested penalty")

    @property
    def penalty(self) -> float:
        return self.cooldown_penalty + self.shown_penalty


class ScoredCandidate(BaseModel):
    """One ranked catalog entry."""

    id: TaskType = Field(..., description="Task type")
    title: str = Field(..., description="Display title")
    completed: bool = Field(..., description="Echoed from today's status")
    score: float = Field(..., description="Higher = more worth suggesting")
    reason: str = Field(..., description="Advisory explanation of the dominant factors")
    factors: ScoreFactors = Field(..., description="Intermediate scoring values")


class RecommendationResult(BaseModel):
    """Output of the recommendation generator."""

    results: List[ScoredCandidate] = Field(default_factory=list, description="Top incomplete candidates")
    all: List[ScoredCandidate] = Field(default_factory=list, description="Every catalog entry, ranked")
