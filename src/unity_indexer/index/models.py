"""Records produced by the parser and consumed by the renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from unity_indexer.core.errors import ScanError


class ScannerState(Enum):
    """States of the per-file declaration scanner."""

    IDLE = "idle"  # nothing pending
    ACCUMULATING = "accumulating"  # comments and/or annotations waiting for a declaration


@dataclass(frozen=True, slots=True)
class FunctionDeclaration:
    """A declaration line recognized by the declaration pattern."""

    return_type: str
    name: str
    params: str
    inline_annotations: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class FunctionRecord:
    """One detected function declaration.

    namespace and class_name are the first ones found in the file and are
    stamped on every record of that file, so functions of a second class in
    the same file are reported under the first class.
    """

    file_name: str
    file_path: str
    relative_path: str  # always "/"-separated, relative to the source directory
    namespace: str
    class_name: str
    function_name: str
    signature: str
    comments: tuple[str, ...] = ()
    annotations: tuple[str, ...] = ()
    is_lifecycle_callback: bool = False
    is_async_generator: bool = False
    keywords: tuple[str, ...] = ()

    @property
    def category(self) -> str | None:
        """Top-level directory of the record, None for files at the source root."""
        head, sep, _ = self.relative_path.partition("/")
        return head if sep and head else None


@dataclass
class ScanResult:
    """Aggregated output of a project scan."""

    records: list[FunctionRecord] = field(default_factory=list)
    failures: list[ScanError] = field(default_factory=list)
    files_parsed: int = 0

    @property
    def lifecycle_count(self) -> int:
        return sum(1 for r in self.records if r.is_lifecycle_callback)

    @property
    def coroutine_count(self) -> int:
        return sum(1 for r in self.records if r.is_async_generator)
