"""Persisted insertion order for the filesystem store."""

from pydantic import BaseModel, Field


class TaskOrder(BaseModel):
    """Order in which tasks were first saved, stored in tasks.yaml."""

    version: int = 1
    order: list[str] = Field(default_factory=list)

    def add_task(self, task_id: str) -> bool:
        """Append a task id if not already present. Returns True if added."""
        if task_id in self.order:
            return False
        self.order.append(task_id)
        return True

    def remove_task(self, task_id: str) -> bool:
        """Remove a task id. Returns True if it was present."""
        if task_id not in self.order:
            return False
        self.order.remove(task_id)
        return True

    def reconcile(self, existing_ids: set[str]) -> bool:
        """
        Make the order match the task files that actually exist.

        - Ids with no file are dropped
        - Files not yet listed are appended, sorted by id

        Returns True if the order changed.
        """
        kept = [task_id for task_id in self.order if task_id in existing_ids]
        missing = sorted(existing_ids - set(kept))
        new_order = kept + missing
        if new_order == self.order:
            return False
        self.order = new_order
        return True
