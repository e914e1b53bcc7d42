"""Store protocol shared by task backends and the caching coordinator."""

from typing import Protocol

from ..models import Result, Task


class TaskStore(Protocol):
    """Interface for task storage backends.

    This protocol defines the contract that every store implementation must
    follow. It is implemented by:
    - FilesystemTaskStore (markdown files on the local disk)
    - RemoteTaskStore (the remote task API)
    - InMemoryTaskStore (process memory, optionally with simulated latency)
    - TaskCacheCoordinator (cache over a local and a remote store)

    Reads return a Result instead of raising. Writes return nothing; whether
    a failing write raises is up to the implementation.
    """

    async def get_tasks(self) -> Result[list[Task]]:
        """Load all tasks.

        Returns:
            Success with the tasks in insertion order, or Error if the tasks
            could not be loaded (including an empty local store).
        """
        ...

    async def get_task(self, task_id: str) -> Result[Task]:
        """Get a single task by ID.

        Args:
            task_id: The task identifier

        Returns:
            Success with the task, or Error if it is missing or unreadable.
        """
        ...

    async def save_task(self, task: Task) -> None:
        """Create or update a task."""
        ...

    async def complete_task(self, task: Task | str) -> None:
        """Mark a task as completed.

        Args:
            task: The task itself, or its id.
        """
        ...

    async def activate_task(self, task: Task | str) -> None:
        """Mark a task as active (not completed).

        Args:
            task: The task itself, or its id.
        """
        ...

    async def clear_completed_tasks(self) -> None:
        """Delete every completed task."""
        ...

    async def refresh_tasks(self) -> None:
        """Mark cached data as stale.

        Only meaningful for stores that cache; backing stores treat it as a
        no-op.
        """
        ...

    async def delete_all_tasks(self) -> None:
        """Delete every task."""
        ...

    async def delete_task(self, task_id: str) -> None:
        """Delete a task by ID.

        Note:
            Does not raise an error if the task doesn't exist.
        """
        ...
