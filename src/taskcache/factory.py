"""Wiring of stores into a coordinator from settings."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from .client import TaskApiClient
from .config import Settings
from .repositories import (
    FilesystemTaskStore,
    InMemoryTaskStore,
    RemoteTaskStore,
    TaskCacheCoordinator,
    TaskStore,
)

logger = logging.getLogger(__name__)


def build_remote_store(settings: Settings) -> TaskStore:
    """Remote API store when a URL is configured, otherwise an in-memory stand-in."""
    if settings.remote_url:
        logger.info("Using remote task API at %s", settings.remote_url)
        client = TaskApiClient(
            settings.remote_url, token=settings.api_token, timeout=settings.timeout
        )
        return RemoteTaskStore(client)

    logger.info("No remote URL configured, using in-memory remote store")
    return InMemoryTaskStore(latency=settings.remote_latency)


def build_coordinator(settings: Settings) -> TaskCacheCoordinator:
    """Create a coordinator over the configured remote and local stores."""
    local = FilesystemTaskStore(settings.task_root)
    return TaskCacheCoordinator(remote=build_remote_store(settings), local=local)


@asynccontextmanager
async def open_coordinator(settings: Settings) -> AsyncIterator[TaskCacheCoordinator]:
    """Build a coordinator and close its remote connection on exit."""
    coordinator = build_coordinator(settings)
    try:
        yield coordinator
    finally:
        if isinstance(coordinator.remote, RemoteTaskStore):
            await coordinator.remote.aclose()
