"""Persisting rendered documents."""

from __future__ import annotations

from pathlib import Path

import structlog

from unity_indexer.core.errors import OutputError

log = structlog.get_logger(__name__)


def write_document(path: Path, text: str) -> Path:
    """Write text as UTF-8, creating parent directories.

    Raises:
        OutputError: The file or its directory could not be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputError.write_failure(str(path), e.strerror or str(e)) from e
    log.debug("document_written", path=str(path), chars=len(text))
    return path
