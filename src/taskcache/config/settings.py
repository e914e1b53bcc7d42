"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    task_root: Path = Field(
        default=Path(".tasks"),
        description="Directory holding the local task files",
    )

    remote_url: str | None = Field(
        default=None,
        description="Base URL of the remote task API (in-memory remote when unset)",
    )

    api_token: str | None = Field(
        default=None,
        description="Bearer token for the remote task API",
    )

    timeout: float = Field(
        default=30.0,
        description="Remote request timeout in seconds",
    )

    remote_latency: float = Field(
        default=0.0,
        description="Simulated latency in seconds for the in-memory remote",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "TASKCACHE_",
    }
