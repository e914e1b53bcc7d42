"""Logging configuration for taskcache."""

import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

LOGGER_NAME = "taskcache"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def verbosity_to_level(verbose: int) -> int:
    """Map a -v count to a logging level (0 and 1 both mean INFO)."""
    return logging.DEBUG if verbose >= 2 else logging.INFO


def setup_logging(verbose: int = 0, log_file: Path | None = None) -> logging.Logger | None:
    """Configure the taskcache logger from verbosity and optional file output.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2+=DEBUG)
        log_file: Optional path to write logs to file

    Returns:
        The configured logger, or None when logging stays off.
    """
    if verbose == 0 and log_file is None:
        return None

    level = verbosity_to_level(verbose)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Calling setup twice must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if verbose > 0:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(level)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # httpx logs every request at INFO; only let it through at DEBUG
    httpx_level = logging.DEBUG if level == logging.DEBUG else logging.WARNING
    logging.getLogger("httpx").setLevel(httpx_level)

    timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")
    logger.info("")
    logger.info("=" * 60)
    logger.info("taskcache starting | %s | level=%s", timestamp, logging.getLevelName(level))
    logger.info("=" * 60)
    return logger
