"""In-memory task store."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

from ..errors import TaskNotFoundError
from ..models import Error, Result, Success, Task

logger = logging.getLogger(__name__)


class InMemoryTaskStore:
    """
    Task store held in process memory.

    Stands in for the remote backend when no task API is configured. Every
    operation first sleeps for ``latency`` seconds to behave like a network
    call. Tasks are kept in insertion order and stored as copies.
    """

    def __init__(self, tasks: Iterable[Task] = (), latency: float = 0.0) -> None:
        """
        Initialize the store.

        Args:
            tasks: Tasks to seed the store with
            latency: Seconds to wait before each operation
        """
        self.latency = latency
        self._tasks: dict[str, Task] = {task.id: task.copy_task() for task in tasks}

    def __len__(self) -> int:
        return len(self._tasks)

    async def get_tasks(self) -> Result[list[Task]]:
        await self._delay()
        return Success([task.copy_task() for task in self._tasks.values()])

    async def get_task(self, task_id: str) -> Result[Task]:
        await self._delay()
        task = self._tasks.get(task_id)
        if task is None:
            return Error(TaskNotFoundError(task_id))
        return Success(task.copy_task())

    async def save_task(self, task: Task) -> None:
        await self._delay()
        self._tasks[task.id] = task.copy_task()

    async def complete_task(self, task: Task | str) -> None:
        await self._delay()
        self._set_completed(task, True)

    async def activate_task(self, task: Task | str) -> None:
        await self._delay()
        self._set_completed(task, False)

    async def clear_completed_tasks(self) -> None:
        await self._delay()
        self._tasks = {task_id: task for task_id, task in self._tasks.items() if not task.completed}

    async def refresh_tasks(self) -> None:
        """No-op: nothing is cached."""
        pass

    async def delete_all_tasks(self) -> None:
        await self._delay()
        self._tasks.clear()

    async def delete_task(self, task_id: str) -> None:
        await self._delay()
        self._tasks.pop(task_id, None)

    def _set_completed(self, task: Task | str, completed: bool) -> None:
        if isinstance(task, Task):
            self._tasks[task.id] = task.copy_task(completed=completed)
            return
        existing = self._tasks.get(task)
        if existing is None:
            logger.debug("Ignoring completion change for unknown task %s", task)
            return
        self._tasks[task] = existing.copy_task(completed=completed)

    async def _delay(self) -> None:
        if self.latency > 0:
            await asyncio.sleep(self.latency)
