"""Renderers for the function index."""

from unity_indexer.render.export import record_to_dict, render_json
from unity_indexer.render.markdown import (
    CATCH_ALL_CATEGORY,
    GLOBAL_FUNCTIONS_LABEL,
    anchor,
    group_by_category,
    group_by_class,
    render_markdown,
)
from unity_indexer.render.writer import write_document

__all__ = [
    "CATCH_ALL_CATEGORY",
    "GLOBAL_FUNCTIONS_LABEL",
    "anchor",
    "group_by_category",
    "group_by_class",
    "record_to_dict",
    "render_json",
    "render_markdown",
    "write_document",
]
