"""Tests for input normalization (centralized defaults)."""

import pytest
from datetime import datetime, timezone

from dailytasks import config
from dailytasks.engine.inputs import normalize_adherence, normalize_inputs
from dailytasks.models.task import HistoryEntry, TaskStatus, TaskType


class TestNormalizeInputs:
    """Test normalize_inputs() defaulting."""

    def test_empty_inputs_get_neutral_defaults(self, now):
        inputs = normalize_inputs({}, now=now)
        assert set(inputs.statuses) == set(TaskType)
        assert all(not s.completed for s in inputs.statuses.values())
        assert all(v == 0.5 for v in inputs.habits.values())
        assert inputs.interests == frozenset()
        assert all(h == HistoryEntry() for h in inputs.history.values())
        assert inputs.max_tasks == config.DEFAULT_MAX_TASKS

    def test_enum_and_string_keys(self, now):
        inputs = normalize_inputs(
            {TaskType.WATER: TaskStatus(completed=True), "meal": {"completed": True}},
            now=now,
        )
        assert inputs.statuses[TaskType.WATER].completed is True
        assert inputs.statuses[TaskType.MEAL].completed is True
        assert inputs.statuses[TaskType.PROTEIN].completed is False

    def test_camel_case_meta(self, now):
        inputs = normalize_inputs({"water": {"meta": {"glasses": 3, "goalGlasses": 8}}}, now=now)
        assert inputs.statuses[TaskType.WATER].meta.goal_glasses == 8.0

    def test_null_meta_keeps_completion(self, now):
        inputs = normalize_inputs({"workout": {"completed": True, "meta": None}}, now=now)
        assert inputs.statuses[TaskType.WORKOUT].completed is True

    def test_unusable_meta_keeps_completion(self, now):
        inputs = normalize_inputs({"protein": {"completed": True, "meta": "n/a"}}, now=now)
        protein = inputs.statuses[TaskType.PROTEIN]
        assert protein.completed is True
        assert protein.meta.protein is None
        assert protein.meta.target is None

    @pytest.mark.parametrize("value,expected", [(2, True), ("done", True), (1, True), (0, False), ("", False), (None, False)])
    def test_completed_uses_truthiness(self, value, expected, now):
        inputs = normalize_inputs({"workout": {"completed": value}}, now=now)
        assert inputs.statuses[TaskType.WORKOUT].completed is expected

    def test_negative_meta_treated_as_absent(self, now):
        inputs = normalize_inputs({"protein": {"meta": {"protein": -5, "target": 150}}}, now=now)
        assert inputs.statuses[TaskType.PROTEIN].meta.protein is None

    def test_single_string_interest(self, now):
        inputs = normalize_inputs({}, interests="workout", now=now)
        assert inputs.interests == frozenset({TaskType.WORKOUT})

    def test_unknown_interests_dropped(self, now):
        inputs = normalize_inputs({}, interests=["yoga", "meal", TaskType.WATER], now=now)
        assert inputs.interests == frozenset({TaskType.MEAL, TaskType.WATER})

    def test_naive_now_becomes_utc(self):
        inputs = normalize_inputs({}, now=datetime(2026, 10, 16, 12, 0))
        assert inputs.now == datetime(2026, 10, 16, 12, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value,expected", [(None, 3), (-1, 0), (0, 0), (2.9, 2), ("4", 4), (float("inf"), 3)])
    def test_max_tasks(self, value, expected, now, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_MAX_TASKS", 3)
        assert normalize_inputs({}, max_tasks=value, now=now).max_tasks == expected


class TestNormalizeAdherence:
    """Test normalize_adherence() coercion."""

    @pytest.mark.parametrize(
        "value,expected",
        [(0.3, 0.3), (0, 0.0), (1.5, 1.0), (-0.2, 0.0), (True, 0.5), ("0.9", 0.5), (None, 0.5), (float("nan"), 0.5)],
    )
    def test_values(self, value, expected):
        assert normalize_adherence(value) == pytest.approx(expected)
