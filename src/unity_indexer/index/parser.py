"""Per-file parser turning C# source text into function records.

The line pass is a two-state machine (see ``DeclarationScanner``). Comment
and attribute lines accumulate; a declaration line consumes whatever has
accumulated; any other statement line throws it away. Blank lines and lines
carrying a brace leave the accumulators alone, so a doc comment survives a
separator line or an opening brace on its own line.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

import structlog

from unity_indexer.config.models import IndexerConfig
from unity_indexer.index.keywords import derive_keywords
from unity_indexer.index.models import FunctionDeclaration, FunctionRecord, ScannerState
from unity_indexer.index.patterns import (
    clean_doc_markup,
    is_annotation_line,
    match_annotation,
    match_class,
    match_doc_comment,
    match_function_declaration,
    match_line_comment,
    match_namespace,
)

log = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class AttachedDeclaration:
    """A declaration together with the comments and attributes right above it."""

    declaration: FunctionDeclaration
    signature: str
    comments: tuple[str, ...]
    annotations: tuple[str, ...]


@dataclass
class DeclarationScanner:
    """Line-by-line state machine over one file.

    Transitions, checked in order for every line:

    ===========================  =============================  ==============
    line                         action                         next state
    ===========================  =============================  ==============
    ``[Attribute]`` only         append attribute name          ACCUMULATING
    ``/// doc``                  append cleaned text            ACCUMULATING
    ``// comment``               append text                    ACCUMULATING
    declaration                  emit, clear accumulators       IDLE
    other code without a brace   clear accumulators             IDLE
    blank, or has ``{``/``}``    nothing                        unchanged
    ===========================  =============================  ==============
    """

    pending_comments: list[str] = field(default_factory=list)
    pending_annotations: list[str] = field(default_factory=list)

    @property
    def state(self) -> ScannerState:
        if self.pending_comments or self.pending_annotations:
            return ScannerState.ACCUMULATING
        return ScannerState.IDLE

    def reset(self) -> None:
        self.pending_comments = []
        self.pending_annotations = []

    def feed(self, line: str) -> AttachedDeclaration | None:
        """Advance over one line; return the declaration it completes, if any."""
        trimmed = line.strip()

        if is_annotation_line(trimmed):
            name = match_annotation(trimmed)
            if name:
                self.pending_annotations.append(name)
            return None

        doc = match_doc_comment(trimmed)
        if doc is not None:
            cleaned = clean_doc_markup(doc)
            if cleaned:
                self.pending_comments.append(cleaned)
            return None

        comment = match_line_comment(trimmed)
        if comment is not None:
            if comment:
                self.pending_comments.append(comment)
            return None

        declaration = match_function_declaration(line)
        if declaration is not None:
            # Tuples, so later appends to the accumulators never reach emitted records.
            attached = AttachedDeclaration(
                declaration=declaration,
                signature=trimmed,
                comments=tuple(self.pending_comments),
                annotations=(*self.pending_annotations, *declaration.inline_annotations),
            )
            self.reset()
            return attached

        if trimmed and "{" not in trimmed and "}" not in trimmed:
            self.reset()
        return None


class FileParser:
    """Extracts function records from one C# file."""

    def __init__(self, config: IndexerConfig | None = None) -> None:
        self.config = config or IndexerConfig()

    def parse(
        self,
        text: str,
        *,
        file_path: str = "",
        relative_path: str = "",
    ) -> list[FunctionRecord]:
        """Parse file content. Never fails on unexpected syntax."""
        namespace = match_namespace(text) or ""
        class_name = match_class(text) or ""
        if relative_path:
            file_name = PurePosixPath(relative_path).name
        else:
            file_name = Path(file_path).name if file_path else ""

        scanner = DeclarationScanner()
        records: list[FunctionRecord] = []
        for line in text.splitlines():
            attached = scanner.feed(line)
            if attached is None:
                continue
            records.append(
                self._build_record(
                    attached,
                    file_name=file_name,
                    file_path=file_path,
                    relative_path=relative_path,
                    namespace=namespace,
                    class_name=class_name,
                )
            )
        return records

    def parse_file(self, path: Path, relative_path: str) -> list[FunctionRecord]:
        """Read and parse one file.

        Raises:
            OSError: The file could not be read.
            UnicodeDecodeError: The file is not valid in the configured encoding.
        """
        text = path.read_text(encoding=self.config.encoding)
        records = self.parse(text, file_path=str(path), relative_path=relative_path)
        log.debug("file_parsed", path=relative_path, functions=len(records))
        return records

    def _build_record(
        self,
        attached: AttachedDeclaration,
        *,
        file_name: str,
        file_path: str,
        relative_path: str,
        namespace: str,
        class_name: str,
    ) -> FunctionRecord:
        decl = attached.declaration
        return FunctionRecord(
            file_name=file_name,
            file_path=file_path,
            relative_path=relative_path,
            namespace=namespace,
            class_name=class_name,
            function_name=decl.name,
            signature=attached.signature,
            comments=attached.comments,
            annotations=attached.annotations,
            is_lifecycle_callback=decl.name in self.config.lifecycle_callbacks,
            is_async_generator=self.config.coroutine_marker in decl.return_type,
            keywords=tuple(derive_keywords(decl.name, attached.comments)),
        )
