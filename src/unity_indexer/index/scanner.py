"""Project traversal: find every script under the source directory and parse it."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import structlog

from unity_indexer.config.models import IndexerConfig
from unity_indexer.core.errors import ScanError
from unity_indexer.index.models import ScanResult
from unity_indexer.index.parser import FileParser

log = structlog.get_logger(__name__)


class ProjectScanner:
    """Walks ``<root>/<source_dir>`` and aggregates function records.

    Unreadable files are reported and skipped. A directory that cannot be
    listed aborts the scan.
    """

    def __init__(
        self, config: IndexerConfig | None = None, parser: FileParser | None = None
    ) -> None:
        self.config = config or IndexerConfig()
        self.parser = parser or FileParser(self.config)

    def scan(self, root: Path) -> ScanResult:
        """Scan a Unity project.

        Records come out in traversal order: directories and files sorted by
        name at every level.

        Raises:
            ScanError: NOT_A_PROJECT_ROOT if the source directory is missing,
                TRAVERSAL_FAILURE if walking a directory fails.
        """
        root = Path(root)
        source_root = root / self.config.source_dir
        if not source_root.is_dir():
            raise ScanError.not_a_project_root(str(root), self.config.source_dir)

        log.info("scan_started", root=str(root), source_dir=self.config.source_dir)
        result = ScanResult()
        for path, relative_path in self._iter_source_files(source_root):
            try:
                records = self.parser.parse_file(path, relative_path)
            except (OSError, UnicodeDecodeError) as e:
                failure = ScanError.file_read_failure(str(path), str(e))
                log.warning("file_read_failed", path=str(path), reason=str(e))
                result.failures.append(failure)
                continue
            result.records.extend(records)
            result.files_parsed += 1

        log.info(
            "scan_finished",
            files=result.files_parsed,
            functions=len(result.records),
            skipped=len(result.failures),
        )
        return result

    def _iter_source_files(self, source_root: Path) -> Iterator[tuple[Path, str]]:
        """Yield (path, path relative to source_root) for each script."""

        def _on_error(err: OSError) -> None:
            raise ScanError.traversal_failure(
                str(err.filename or source_root), err.strerror or str(err)
            ) from err

        extension = self.config.source_extension
        for dirpath, dirnames, filenames in os.walk(source_root, onerror=_on_error):
            dirnames.sort()
            for filename in sorted(filenames):
                if not filename.endswith(extension):
                    continue
                path = Path(dirpath) / filename
                yield path, path.relative_to(source_root).as_posix()


def scan_project(root: Path, config: IndexerConfig | None = None) -> ScanResult:
    """Scan a Unity project with a fresh scanner."""
    return ProjectScanner(config).scan(root)
