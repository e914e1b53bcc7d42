"""Exceptions raised by task stores."""


class TaskStoreError(Exception):
    """Base exception for task store failures."""

    pass


class TaskNotFoundError(TaskStoreError):
    """No task exists with the requested id."""

    def __init__(self, task_id: str, message: str | None = None) -> None:
        self.task_id = task_id
        super().__init__(message or f"Task not found: {task_id}")


class TaskStoreEmptyError(TaskStoreError):
    """The store has no tasks to return."""

    pass


class TaskApiError(TaskStoreError):
    """Base exception for remote task API errors."""

    pass


class TaskApiAuthError(TaskApiError):
    """Authentication failed."""

    pass


class TaskApiForbiddenError(TaskApiError):
    """Permission denied."""

    pass


class TaskApiNotFoundError(TaskApiError):
    """Resource not found."""

    pass
