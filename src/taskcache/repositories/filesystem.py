"""Filesystem-based store for local task persistence."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from urllib.parse import quote, unquote

import frontmatter
import yaml
from pydantic import ValidationError

from ..errors import TaskNotFoundError, TaskStoreEmptyError, TaskStoreError
from ..models import Error, Result, Success, Task, TaskOrder

logger = logging.getLogger(__name__)


class FilesystemTaskStore:
    """
    Store for task files kept on the local filesystem.

    Each task is a ``<id>.md`` file: YAML front matter holds the title and
    completion flag, the markdown body is the description. Ids are
    percent-encoded into file names, so any string id can be stored. The
    order in which tasks were first saved is kept in a tasks.yaml file.
    """

    TASKS_YAML = "tasks.yaml"
    SUFFIX = ".md"

    def __init__(self, task_root: Path) -> None:
        """
        Initialize the store.

        Args:
            task_root: Path to the tasks directory (e.g., .tasks/)
        """
        self.task_root = task_root
        self._order: TaskOrder | None = None

    def ensure_directory(self) -> None:
        """Create the tasks directory if it doesn't exist."""
        self.task_root.mkdir(parents=True, exist_ok=True)

    def get_filepath(self, task_id: str) -> Path:
        """Get the markdown file path for a task id."""
        return self.task_root / f"{quote(task_id, safe='')}{self.SUFFIX}"

    # --- Reads ---

    async def get_tasks(self) -> Result[list[Task]]:
        """Load all tasks in the order they were first saved.

        An empty or missing directory is reported as an Error so callers can
        fall back to another store.
        """
        try:
            tasks = self._load_tasks()
            if not tasks:
                return Error(TaskStoreEmptyError(f"No tasks stored in {self.task_root}"))
            order = self._reconciled_order(set(tasks))
        except TaskStoreError as e:
            return Error(e)
        except OSError as e:
            return Error(TaskStoreError(f"Cannot read task directory {self.task_root}: {e}"))

        return Success([tasks[task_id] for task_id in order])

    async def get_task(self, task_id: str) -> Result[Task]:
        filepath = self.get_filepath(task_id)
        if not filepath.exists():
            return Error(TaskNotFoundError(task_id))

        task = self._parse_task_file(filepath)
        if task is None:
            return Error(TaskStoreError(f"Cannot parse task file {filepath.name}"))
        return Success(task)

    # --- Writes ---

    async def save_task(self, task: Task) -> None:
        """
        Write a task to its markdown file.

        Creates or overwrites the file and records the id in tasks.yaml.
        """
        self._write_task_file(task)

        self._load_order()
        if self._order is not None and self._order.add_task(task.id):
            self._save_order()

    async def complete_task(self, task: Task | str) -> None:
        self._set_completed(task, True)

    async def activate_task(self, task: Task | str) -> None:
        self._set_completed(task, False)

    async def clear_completed_tasks(self) -> None:
        """Delete the files of all completed tasks."""
        removed = [task.id for task in self._load_tasks().values() if task.completed]
        for task_id in removed:
            self._remove_task(task_id)
        if removed:
            self._save_order()

    async def refresh_tasks(self) -> None:
        """No-op: files are always read fresh."""
        pass

    async def delete_all_tasks(self) -> None:
        """Delete every task file and the ordering file."""
        if not self.task_root.exists():
            return
        for filepath in self._iter_task_files():
            filepath.unlink()
        yaml_path = self.task_root / self.TASKS_YAML
        if yaml_path.exists():
            yaml_path.unlink()
        self._order = None

    async def delete_task(self, task_id: str) -> None:
        """Delete a task file. Missing files are ignored."""
        if self._remove_task(task_id):
            self._save_order()

    # --- Private Methods ---

    def _set_completed(self, task: Task | str, completed: bool) -> None:
        if isinstance(task, str):
            filepath = self.get_filepath(task)
            found = self._parse_task_file(filepath) if filepath.exists() else None
            if found is None:
                logger.debug("Ignoring completion change for unknown task %s", task)
                return
            task = found
        self._write_task_file(task.copy_task(completed=completed))

        self._load_order()
        if self._order is not None and self._order.add_task(task.id):
            self._save_order()

    def _write_task_file(self, task: Task) -> None:
        self.ensure_directory()
        filepath = self.get_filepath(task.id)

        post = frontmatter.Post(task.description)
        post.metadata = task.to_frontmatter()

        # sort_keys=False preserves original key order
        with filepath.open("w") as f:
            f.write(frontmatter.dumps(post, sort_keys=False))

    def _remove_task(self, task_id: str) -> bool:
        """Delete a task file and drop it from the order. Returns True if either existed."""
        filepath = self.get_filepath(task_id)
        removed = filepath.exists()
        if removed:
            filepath.unlink()

        if not self.task_root.exists():
            return removed
        self._load_order()
        if self._order is not None and self._order.remove_task(task_id):
            removed = True
        return removed

    def _load_tasks(self) -> dict[str, Task]:
        """Scan directory and load all task files."""
        tasks: dict[str, Task] = {}
        if not self.task_root.exists():
            return tasks

        for filepath in self._iter_task_files():
            task = self._parse_task_file(filepath)
            if task:
                tasks[task.id] = task
        return tasks

    def _iter_task_files(self) -> Iterator[Path]:
        """Iterate over all .md files in the task root."""
        yield from self.task_root.glob(f"*{self.SUFFIX}")

    def _parse_task_file(self, filepath: Path) -> Task | None:
        """Parse a single task file, returning None if it is unreadable."""
        try:
            post = frontmatter.load(filepath)
            return Task.from_frontmatter(
                task_id=unquote(filepath.name.removesuffix(self.SUFFIX)),
                metadata=post.metadata,
                body=post.content,
            )
        except (OSError, ValueError, ValidationError, yaml.YAMLError) as e:
            logger.warning("Skipping unreadable task file %s: %s", filepath.name, e)
            return None

    def _reconciled_order(self, existing_ids: set[str]) -> list[str]:
        """Return the saved order adjusted to the files on disk, saving any fix-up."""
        self._load_order()
        if self._order is None:
            return sorted(existing_ids)
        if self._order.reconcile(existing_ids):
            self._save_order()
        return list(self._order.order)

    def _load_order(self) -> None:
        """Load tasks.yaml if it exists.

        Raises:
            TaskStoreError: tasks.yaml is not valid YAML or has the wrong shape
        """
        if self._order is not None:
            return

        yaml_path = self.task_root / self.TASKS_YAML
        if yaml_path.exists():
            try:
                with yaml_path.open() as f:
                    data = yaml.safe_load(f) or {}
                self._order = TaskOrder.model_validate(data)
            except (yaml.YAMLError, ValidationError) as e:
                raise TaskStoreError(f"Corrupt {self.TASKS_YAML} in {self.task_root}: {e}") from e
        else:
            self._order = TaskOrder()

    def _save_order(self) -> None:
        """Write tasks.yaml to disk."""
        if self._order is None:
            return

        self.ensure_directory()
        yaml_path = self.task_root / self.TASKS_YAML

        data = self._order.model_dump()
        with yaml_path.open("w") as f:
            f.write("# Auto-generated - do not edit manually\n")
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

