"""Task catalog for dailytasks.

The catalog is the fixed, closed set of task types the engine can ever
recommend. Declaration order is significant: it breaks score ties.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Union

from dailytasks.models.task import TaskDefinition, TaskType


TASK_CATALOG: Mapping[TaskType, TaskDefinition] = MappingProxyType({
    TaskType.WATER: TaskDefinition(title="Hit water goal", base_weight=1.0, cooldown_hours=3),
    TaskType.PROTEIN: TaskDefinition(title="Hit protein target", base_weight=1.0, cooldown_hours=3),
    TaskType.WORKOUT: TaskDefinition(title="Do a workout", base_weight=1.2, cooldown_hours=6),
    TaskType.MENTAL: TaskDefinition(title="Do a mental session", base_weight=1.1, cooldown_hours=6),
    TaskType.MEAL: TaskDefinition(title="Log a meal", base_weight=0.9, cooldown_hours=2),
})


def to_task_type(value: Union[TaskType, str]) -> Optional[TaskType]:
    """Resolve a task type from an enum member or its string value.

    Args:
        value: TaskType or string such as "water"

    Returns:
        Matching TaskType, or None if the value is not in the catalog
    """
    try:
        return TaskType(value)
    except (ValueError, TypeError):
        return None


def get_task_definition(task_type: Union[TaskType, str]) -> TaskDefinition:
    """Look up the catalog definition for a task type.

    Args:
        task_type: TaskType or its string value

    Returns:
        TaskDefinition for the type

    Raises:
        KeyError: If the type is not in the catalog
    """
    resolved = to_task_type(task_type)
    if resolved is None:
        raise KeyError(task_type)
    return TASK_CATALOG[resolved]
