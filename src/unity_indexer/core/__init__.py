"""Core module exports."""

from unity_indexer.core.errors import (
    ConfigError,
    ErrorCode,
    OutputError,
    ScanError,
    UnityIndexerError,
)
from unity_indexer.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)
from unity_indexer.core.progress import spinner, status, task

__all__ = [
    # Errors
    "UnityIndexerError",
    "ConfigError",
    "ErrorCode",
    "OutputError",
    "ScanError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
    # Progress
    "spinner",
    "status",
    "task",
]
