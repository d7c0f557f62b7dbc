"""Markdown index document.

Layout: title, statistics, navigation by top-level directory, then one
section per directory holding one subsection per class and one entry per
function. The output depends only on the records passed in.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

import structlog

from unity_indexer.config.models import IndexerConfig
from unity_indexer.index.models import FunctionRecord

CATCH_ALL_CATEGORY = "Other"
GLOBAL_FUNCTIONS_LABEL = "Global functions"
LIFECYCLE_MARKER = "🎯 Lifecycle"
COROUTINE_MARKER = "⏱️ Coroutine"

_ANCHOR_STRIP_RE = re.compile(r"[^\w\- ]")

log = structlog.get_logger(__name__)


def anchor(title: str) -> str:
    """GitHub-style heading anchor: lowercase, punctuation dropped, spaces to dashes."""
    return _ANCHOR_STRIP_RE.sub("", title.strip().lower()).replace(" ", "-")


def group_by_category(records: Sequence[FunctionRecord]) -> dict[str, list[FunctionRecord]]:
    """Group by top-level directory, categories sorted, input order kept inside."""
    groups: dict[str, list[FunctionRecord]] = {}
    for record in records:
        groups.setdefault(record.category or CATCH_ALL_CATEGORY, []).append(record)
    return {name: groups[name] for name in sorted(groups)}


def group_by_class(records: Sequence[FunctionRecord]) -> dict[str, list[FunctionRecord]]:
    """Group by class name, sorted; records without a class go under the global label."""
    groups: dict[str, list[FunctionRecord]] = {}
    for record in records:
        groups.setdefault(record.class_name or GLOBAL_FUNCTIONS_LABEL, []).append(record)
    return {name: groups[name] for name in sorted(groups)}


def render_markdown(
    records: Sequence[FunctionRecord],
    config: IndexerConfig | None = None,
) -> str:
    """Render the whole index document."""
    config = config or IndexerConfig()
    categories = group_by_category(records)
    lifecycle_count = sum(1 for r in records if r.is_lifecycle_callback)
    coroutine_count = sum(1 for r in records if r.is_async_generator)

    parts: list[str] = [
        "# Unity Project Function Index",
        "",
        "> 🤖 Generated by unity-indexer to help people and AI assistants locate functions quickly.",
        "",
        "**📊 Statistics**:",
        f"- Total functions: {len(records)}",
        f"- Lifecycle callbacks: {lifecycle_count}",
        f"- Coroutines: {coroutine_count}",
        "",
        "---",
        "",
        "## 🔍 Quick navigation",
        "",
    ]
    for name, group in categories.items():
        parts.append(f"- [📁 {name} ({len(group)})](#{anchor(name)})")
    parts.extend(["", "---", ""])

    for name, group in categories.items():
        parts.append(f"## {name}")
        parts.append("")
        parts.append(f"> {len(group)} functions")
        parts.append("")
        for class_name, class_records in group_by_class(group).items():
            parts.append(f"### 🔸 Class: `{class_name}`")
            parts.append("")
            parts.append(f"📄 File: `{class_records[0].relative_path}`")
            parts.append("")
            for record in class_records:
                parts.extend(_render_function(record, config.max_keywords))

    parts.extend(_usage_tips())
    text = "\n".join(parts) + "\n"
    log.debug("index_rendered", functions=len(records), categories=len(categories))
    return text


def _render_function(record: FunctionRecord, max_keywords: int) -> list[str]:
    markers = []
    if record.is_lifecycle_callback:
        markers.append(LIFECYCLE_MARKER)
    if record.is_async_generator:
        markers.append(COROUTINE_MARKER)
    marker_str = " " + " ".join(markers) if markers else ""

    lines = [f"#### `{record.function_name}`{marker_str}", ""]

    if record.annotations:
        attrs = ", ".join(f"`[{name}]`" for name in record.annotations)
        lines.extend([f"**Attributes**: {attrs}", ""])

    lines.extend(["```csharp", record.signature, "```", ""])

    comments = [c for c in record.comments if c.strip()]
    if comments:
        lines.append("**📝 Description**:")
        lines.extend(f"> {comment}" for comment in comments)
        lines.append("")

    if record.keywords:
        shown = record.keywords[:max_keywords]
        lines.extend(["**🔑 Keywords**: " + " ".join(f"`{kw}`" for kw in shown), ""])

    lines.extend(["---", ""])
    return lines


def _usage_tips() -> list[str]:
    return [
        "## 💡 Usage tips",
        "",
        "This document supports the following searches:",
        "",
        '1. **By feature**: keywords such as "move", "attack", "ui"',
        '2. **By kind**: search for the "Lifecycle" or "Coroutine" markers',
        "3. **By path**: use a directory name to find its section",
        "4. **By identifier**: search class or function names directly",
        "",
        "> 💡 Tip: use Ctrl+F in this document, or hand it to an AI assistant for questions.",
    ]
