"""Data models."""

from .result import Error, Result, Success
from .task import Task
from .task_order import TaskOrder

__all__ = [
    "Error",
    "Result",
    "Success",
    "Task",
    "TaskOrder",
]
