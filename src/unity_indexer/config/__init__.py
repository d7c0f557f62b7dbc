"""Config module exports."""

from unity_indexer.config.loader import load_config
from unity_indexer.config.models import (
    IndexerConfig,
    LoggingConfig,
    LogOutputConfig,
    UnityIndexerConfig,
)

__all__ = [
    "load_config",
    "IndexerConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "UnityIndexerConfig",
]
