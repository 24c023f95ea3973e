"""Pytest fixtures and configuration for dailytasks tests."""

import pytest
from datetime import datetime, timezone

from dailytasks.models.task import TaskStatus, TaskType


@pytest.fixture
def now():
    """Fixed clock sample shared by penalty tests."""
    return datetime(2026, 10, 16, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def incomplete_statuses():
    """Every task not completed, no numeric progress recorded."""
    return {task_type: TaskStatus() for task_type in TaskType}


@pytest.fixture
def example_statuses():
    """Mixed day: some water, protein and meal done, workout and mental open."""
    return {
        "water": {"completed": False, "meta": {"glasses": 2, "goalGlasses": 8}},
        "protein": {"completed": True},
        "workout": {"completed": False},
        "mental": {"completed": False},
        "meal": {"completed": True},
    }


@pytest.fixture
def water_status_base():
    """Base water status data that can be overridden."""
    return {"completed": False, "meta": {"glasses": 0, "goal_glasses": 8}}
