"""Repository layer for data access."""

from .coordinator import TaskCacheCoordinator
from .filesystem import FilesystemTaskStore
from .memory import InMemoryTaskStore
from .protocol import TaskStore
from .remote import RemoteTaskStore

__all__ = [
    "FilesystemTaskStore",
    "InMemoryTaskStore",
    "RemoteTaskStore",
    "TaskCacheCoordinator",
    "TaskStore",
]
