"""
Module Tasks - discovery of tasks in module tasks directories.

A task is one or more executable files sharing a name stem in a module's
flat tasks/ directory, plus an optional <stem>.json metadata file that is
read lazily on first access.
"""

__version__ = "1.0.0"

from module_tasks.models import (
    Strictness,
    TaskModule,
    TaskSummary,
)

from module_tasks.naming import (
    is_task_name,
    is_tasks_filename,
    is_tasks_metadata_filename,
    is_tasks_executable_filename,
)
from module_tasks.task import Task, TaskError, InvalidName, InvalidFile, FaultyMetadata
from module_tasks.scanner import TaskScanner, tasks_in_module

__all__ = [
    # Models
    "Strictness",
    "TaskModule",
    "TaskSummary",
    # Naming
    "is_task_name",
    "is_tasks_filename",
    "is_tasks_metadata_filename",
    "is_tasks_executable_filename",
    # Tasks
    "Task",
    "TaskError",
    "InvalidName",
    "InvalidFile",
    "FaultyMetadata",
    # Components
    "TaskScanner",
    "tasks_in_module",
]
