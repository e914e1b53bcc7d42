"""Task domain model."""

import uuid
from typing import Any

from pydantic import BaseModel, Field


def _new_task_id() -> str:
    return str(uuid.uuid4())


class Task(BaseModel):
    """A single to-do item.

    Identity is the ``id``: two tasks with the same id compare equal even if
    their other fields differ.
    """

    id: str = Field(default_factory=_new_task_id)
    title: str = ""
    description: str = ""
    completed: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def title_for_list(self) -> str:
        """Title shown in task lists - falls back to the description."""
        return self.title if self.title else self.description

    @property
    def is_active(self) -> bool:
        return not self.completed

    @property
    def is_empty(self) -> bool:
        """True when the task has neither a title nor a description."""
        return not self.title and not self.description

    def copy_task(self, **changes: Any) -> "Task":
        """Return a new Task with the same field values.

        Keyword arguments override individual fields on the copy, e.g.
        ``task.copy_task(completed=True)``.
        """
        data = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
        }
        data.update(changes)
        return Task(**data)

    def same_fields(self, other: "Task") -> bool:
        """Field-by-field comparison, unlike ``==`` which compares ids only."""
        return (
            self.id == other.id
            and self.title == other.title
            and self.description == other.description
            and self.completed == other.completed
        )

    def to_frontmatter(self) -> dict:
        """Convert to dict suitable for YAML front matter.

        The description normally lives in the markdown body. Front matter
        parsing strips the body, so a description with leading or trailing
        whitespace is also written here to read back unchanged.
        """
        data: dict = {}
        if self.title:
            data["title"] = self.title
        data["completed"] = self.completed
        if self.description != self.description.strip():
            data["description"] = self.description
        return data

    @classmethod
    def from_frontmatter(cls, task_id: str, metadata: dict, body: str) -> "Task":
        """Create Task from parsed front matter.

        The body is the description unless front matter carries one.
        """
        description = metadata.get("description")
        return cls(
            id=task_id,
            title=metadata.get("title") or "",
            description=description if isinstance(description, str) else body,
            completed=bool(metadata.get("completed", False)),
        )

    def to_payload(self) -> dict[str, Any]:
        """JSON body sent to the remote task API."""
        return self.model_dump(mode="json")

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "Task":
        """Create Task from a remote task API JSON object."""
        return cls.model_validate(data)
