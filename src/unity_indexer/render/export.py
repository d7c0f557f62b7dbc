"""JSON export of function records for other tools."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from unity_indexer.index.models import FunctionRecord


def record_to_dict(record: FunctionRecord) -> dict[str, Any]:
    return {
        "class": record.class_name,
        "function": record.function_name,
        "file": record.relative_path,
        "namespace": record.namespace,
        "comments": list(record.comments),
        "annotations": list(record.annotations),
        "keywords": list(record.keywords),
        "is_lifecycle_callback": record.is_lifecycle_callback,
        "is_coroutine": record.is_async_generator,
    }


def render_json(records: Sequence[FunctionRecord]) -> str:
    """Serialize records as an indented JSON array, in input order."""
    payload = [record_to_dict(r) for r in records]
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
