"""Sub-command implementations run against a coordinator."""

from __future__ import annotations

import argparse

from ..models import Error, Task
from ..repositories import TaskCacheCoordinator
from . import output


async def cmd_list(coordinator: TaskCacheCoordinator, args: argparse.Namespace) -> int:
    result = await coordinator.get_tasks()
    if isinstance(result, Error):
        output.error(f"Could not load tasks: {result.message}")
        return 1
    tasks = result.value
    if args.active:
        tasks = [task for task in tasks if task.is_active]
    output.print_tasks(tasks)
    return 0


async def cmd_show(coordinator: TaskCacheCoordinator, args: argparse.Namespace) -> int:
    result = await coordinator.get_task(args.task_id)
    if isinstance(result, Error):
        output.error(result.message)
        return 1
    output.print_task(result.value)
    return 0


async def cmd_add(coordinator: TaskCacheCoordinator, args: argparse.Namespace) -> int:
    task = Task(title=args.title, description=args.description)
    if task.is_empty:
        output.error("A task needs a title or a description")
        return 1
    await coordinator.save_task(task)
    output.success(f"Added {task.id}")
    return 0


async def cmd_complete(coordinator: TaskCacheCoordinator, args: argparse.Namespace) -> int:
    return await _set_completed(coordinator, args.task_id, completed=True)


async def cmd_activate(coordinator: TaskCacheCoordinator, args: argparse.Namespace) -> int:
    return await _set_completed(coordinator, args.task_id, completed=False)


async def cmd_delete(coordinator: TaskCacheCoordinator, args: argparse.Namespace) -> int:
    await coordinator.delete_task(args.task_id)
    output.success(f"Deleted {args.task_id}")
    return 0


async def cmd_clear_completed(
    coordinator: TaskCacheCoordinator,
    args: argparse.Namespace,  # noqa: ARG001
) -> int:
    await coordinator.clear_completed_tasks()
    output.success("Cleared completed tasks")
    return 0


async def cmd_refresh(coordinator: TaskCacheCoordinator, args: argparse.Namespace) -> int:
    await coordinator.refresh_tasks()
    return await cmd_list(coordinator, args)


async def _set_completed(
    coordinator: TaskCacheCoordinator, task_id: str, completed: bool
) -> int:
    # complete_task(id) only looks in the cache, so load the task first
    result = await coordinator.get_task(task_id)
    if isinstance(result, Error):
        output.error(result.message)
        return 1
    if completed:
        await coordinator.complete_task(task_id)
        output.success(f"Completed {task_id}")
    else:
        await coordinator.activate_task(task_id)
        output.success(f"Activated {task_id}")
    return 0
