"""Task store backed by the remote task API."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from ..client import TaskApiClient
from ..errors import TaskApiError, TaskApiNotFoundError, TaskNotFoundError, TaskStoreError
from ..models import Error, Result, Success, Task

logger = logging.getLogger(__name__)


class RemoteTaskStore:
    """Store implementation for the remote task API.

    Reads turn client failures into Error results. Writes let TaskApiError
    propagate to the caller.
    """

    def __init__(self, client: TaskApiClient) -> None:
        """
        Initialize the remote store.

        Args:
            client: Client for the remote task API
        """
        self._client = client

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_tasks(self) -> Result[list[Task]]:
        try:
            items = await self._client.list_tasks()
            tasks = [Task.from_payload(item) for item in items]
        except TaskApiError as e:
            return Error(e)
        except ValidationError as e:
            logger.warning("Remote returned malformed tasks: %s", e)
            return Error(TaskStoreError(f"Malformed task list from remote: {e}"))
        return Success(tasks)

    async def get_task(self, task_id: str) -> Result[Task]:
        try:
            task = Task.from_payload(await self._client.get_task(task_id))
        except TaskApiNotFoundError:
            return Error(TaskNotFoundError(task_id))
        except TaskApiError as e:
            return Error(e)
        except ValidationError as e:
            logger.warning("Remote returned malformed task %s: %s", task_id, e)
            return Error(TaskStoreError(f"Malformed task {task_id} from remote: {e}"))
        return Success(task)

    async def save_task(self, task: Task) -> None:
        await self._client.put_task(task.id, task.to_payload())

    async def complete_task(self, task: Task | str) -> None:
        """Complete by id, or upsert the whole task as completed."""
        if isinstance(task, Task):
            await self._client.put_task(task.id, task.copy_task(completed=True).to_payload())
        else:
            await self._client.complete_task(task)

    async def activate_task(self, task: Task | str) -> None:
        if isinstance(task, Task):
            await self._client.put_task(task.id, task.copy_task(completed=False).to_payload())
        else:
            await self._client.activate_task(task)

    async def clear_completed_tasks(self) -> None:
        await self._client.clear_completed()

    async def refresh_tasks(self) -> None:
        """No-op: the remote API is always authoritative for itself."""
        pass

    async def delete_all_tasks(self) -> None:
        await self._client.delete_all()

    async def delete_task(self, task_id: str) -> None:
        try:
            await self._client.delete_task(task_id)
        except TaskApiNotFoundError:
            logger.debug("Remote task %s already deleted", task_id)
