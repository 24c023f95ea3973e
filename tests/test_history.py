"""Tests for history bookkeeping helpers."""

from datetime import timedelta

from dailytasks.engine.history import record_completed, record_shown
from dailytasks.engine.ranking import generate_recommendations
from dailytasks.models.task import HistoryEntry, TaskType


class TestRecordShown:

    def test_sets_last_shown_without_mutating_input(self, now):
        original = {"water": {"lastCompletedAt": "2026-10-15T08:00:00Z"}}
        updated = record_shown(original, ["water", TaskType.MEAL], now=now)

        assert updated[TaskType.WATER].last_shown_at == now
        assert updated[TaskType.WATER].last_completed_at == "2026-10-15T08:00:00Z"
        assert updated[TaskType.MEAL].last_shown_at == now
        assert updated[TaskType.PROTEIN] == HistoryEntry()
        assert original == {"water": {"lastCompletedAt": "2026-10-15T08:00:00Z"}}

    def test_unknown_ids_ignored(self, now):
        updated = record_shown(None, ["yoga"], now=now)
        assert all(entry == HistoryEntry() for entry in updated.values())

    def test_shown_tasks_penalized_on_next_call(self, incomplete_statuses, now):
        first = generate_recommendations(incomplete_statuses, max_tasks=1, now=now)
        top = first.results[0].id
        history = record_shown({}, [c.id for c in first.results], now=now)

        later = generate_recommendations(
            incomplete_statuses, history=history, max_tasks=1, now=now + timedelta(minutes=10)
        )
        shown = next(c for c in later.all if c.id == top)
        assert shown.factors.shown_penalty == 0.2
        assert "cooldown/duplicate" in shown.reason


class TestRecordCompleted:

    def test_sets_last_completed(self, now):
        updated = record_completed({}, "workout", now=now)
        assert updated[TaskType.WORKOUT].last_completed_at == now
        assert updated[TaskType.WORKOUT].last_shown_at is None

    def test_completion_starts_cooldown(self, incomplete_statuses, now):
        history = record_completed({}, TaskType.MEAL, now=now - timedelta(hours=1))
        result = generate_recommendations(incomplete_statuses, history=history, now=now)
        meal = next(c for c in result.all if c.id == TaskType.MEAL)
        # 2h cooldown, 1h elapsed
        assert meal.factors.cooldown_penalty == 0.5
