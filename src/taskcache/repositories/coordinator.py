"""Caching coordinator over a local and a remote task store."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable

from ..errors import TaskNotFoundError, TaskStoreError
from ..models import Error, Result, Success, Task
from .protocol import TaskStore

logger = logging.getLogger(__name__)


class TaskCacheCoordinator:
    """
    Task store that keeps an in-memory cache in front of two backing stores.

    Reads try the cache, then the local store, then the remote store, and
    cache whatever they find. Writes update the cache first and then go to
    the remote store and the local store, in that order.

    The local store is trusted over the remote one until refresh_tasks()
    marks the cache dirty; the next get_tasks() then reloads everything from
    the remote store and overwrites the local store with it.

    Write failures in either backing store are logged and otherwise ignored:
    the cache is never rolled back, so it can drift from a store whose write
    failed.
    """

    def __init__(self, remote: TaskStore, local: TaskStore) -> None:
        """
        Initialize the coordinator.

        Args:
            remote: Store backed by the remote task API
            local: Store backed by local persistent storage
        """
        self._remote = remote
        self._local = local
        self._cache: dict[str, Task] = {}
        self._dirty = False

    @property
    def cached_tasks(self) -> dict[str, Task]:
        """Copy of the cache, in insertion order."""
        return {task_id: task.copy_task() for task_id, task in self._cache.items()}

    @property
    def remote(self) -> TaskStore:
        return self._remote

    @property
    def local(self) -> TaskStore:
        return self._local

    @property
    def cache_is_dirty(self) -> bool:
        return self._dirty

    # --- Reads ---

    async def get_tasks(self) -> Result[list[Task]]:
        """Return all tasks, from the cache when it is fresh."""
        if self._cache and not self._dirty:
            logger.debug("get_tasks: cache hit (%d tasks)", len(self._cache))
            return Success(self._cached_values())

        if self._dirty:
            logger.debug("get_tasks: cache dirty, loading from remote")
            return await self._get_tasks_from_remote()

        local_result = await self._local.get_tasks()
        if isinstance(local_result, Success):
            logger.debug("get_tasks: loaded %d tasks from local", len(local_result.value))
            self._refresh_cache(local_result.value)
            return Success(self._cached_values())

        logger.info(
            "get_tasks: local store unavailable (%s), loading from remote", local_result.message
        )
        return await self._get_tasks_from_remote()

    async def get_task(self, task_id: str) -> Result[Task]:
        """Return one task, trying the cache, then local, then remote."""
        cached = self._cache.get(task_id)
        if cached is not None:
            logger.debug("get_task %s: cache hit", task_id)
            return Success(cached.copy_task())

        local_result = await self._local.get_task(task_id)
        if isinstance(local_result, Success):
            logger.debug("get_task %s: found in local", task_id)
            return Success(self._cache_task(local_result.value).copy_task())

        remote_result = await self._remote.get_task(task_id)
        if isinstance(remote_result, Success):
            logger.debug("get_task %s: found in remote", task_id)
            return Success(self._cache_task(remote_result.value).copy_task())

        logger.info("get_task %s: not available in any store", task_id)
        error = TaskNotFoundError(task_id, f"Error loading task: {task_id}")
        error.__cause__ = remote_result.cause
        return Error(error)

    # --- Writes ---

    async def save_task(self, task: Task) -> None:
        cached = self._cache_task(task)
        await self._propagate("save_task", lambda store: store.save_task(cached.copy_task()))

    async def complete_task(self, task: Task | str) -> None:
        if isinstance(task, str):
            found = self._cache.get(task)
            if found is None:
                return
            task = found
        cached = self._cache_task(task, completed=True)
        await self._propagate(
            "complete_task", lambda store: store.complete_task(cached.copy_task())
        )

    async def activate_task(self, task: Task | str) -> None:
        if isinstance(task, str):
            found = self._cache.get(task)
            if found is None:
                return
            task = found
        cached = self._cache_task(task, completed=False)
        await self._propagate(
            "activate_task", lambda store: store.activate_task(cached.copy_task())
        )

    async def clear_completed_tasks(self) -> None:
        await self._propagate("clear_completed_tasks", lambda store: store.clear_completed_tasks())
        self._cache = {
            task_id: task for task_id, task in self._cache.items() if not task.completed
        }

    async def refresh_tasks(self) -> None:
        """Mark the cache dirty so the next get_tasks() reloads from remote."""
        logger.debug("Cache marked dirty")
        self._dirty = True

    async def delete_all_tasks(self) -> None:
        await self._propagate("delete_all_tasks", lambda store: store.delete_all_tasks())
        self._cache.clear()

    async def delete_task(self, task_id: str) -> None:
        await self._propagate("delete_task", lambda store: store.delete_task(task_id))
        self._cache.pop(task_id, None)

    # --- Private Methods ---

    async def _get_tasks_from_remote(self) -> Result[list[Task]]:
        """Load all tasks from remote, then overwrite the cache and local store."""
        remote_result = await self._remote.get_tasks()
        if isinstance(remote_result, Error):
            logger.warning("Remote load failed: %s", remote_result.message)
            return remote_result

        tasks = remote_result.value
        self._refresh_cache(tasks)
        await self._refresh_local_store(tasks)
        logger.info("Refreshed %d tasks from remote", len(tasks))
        return Success(self._cached_values())

    def _refresh_cache(self, tasks: Iterable[Task]) -> None:
        self._cache.clear()
        for task in tasks:
            self._cache_task(task)
        self._dirty = False

    async def _refresh_local_store(self, tasks: list[Task]) -> None:
        await self._write("local", "delete_all_tasks", self._local.delete_all_tasks)
        for task in tasks:
            copy = task.copy_task()
            await self._write("local", "save_task", lambda copy=copy: self._local.save_task(copy))

    def _cache_task(self, task: Task, **changes: object) -> Task:
        """Store a copy of the task in the cache and return the cached copy."""
        cached = task.copy_task(**changes)
        self._cache[cached.id] = cached
        return cached

    def _cached_values(self) -> list[Task]:
        return [task.copy_task() for task in self._cache.values()]

    async def _propagate(
        self, operation: str, call: Callable[[TaskStore], Awaitable[None]]
    ) -> None:
        """Apply a write to the remote store, then the local store."""
        await self._write("remote", operation, lambda: call(self._remote))
        await self._write("local", operation, lambda: call(self._local))

    async def _write(
        self, store_name: str, operation: str, call: Callable[[], Awaitable[None]]
    ) -> None:
        try:
            await call()
        except (TaskStoreError, OSError) as e:
            logger.warning(
                "%s failed on %s store, cache not rolled back: %s", operation, store_name, e
            )
