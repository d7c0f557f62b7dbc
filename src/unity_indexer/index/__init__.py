"""Function index: patterns, parser, scanner and the records they produce."""

from unity_indexer.index.keywords import derive_keywords, split_camel_case
from unity_indexer.index.models import (
    FunctionDeclaration,
    FunctionRecord,
    ScannerState,
    ScanResult,
)
from unity_indexer.index.parser import AttachedDeclaration, DeclarationScanner, FileParser
from unity_indexer.index.scanner import ProjectScanner, scan_project

__all__ = [
    # Models
    "FunctionDeclaration",
    "FunctionRecord",
    "ScannerState",
    "ScanResult",
    # Keywords
    "derive_keywords",
    "split_camel_case",
    # Parser
    "AttachedDeclaration",
    "DeclarationScanner",
    "FileParser",
    # Scanner
    "ProjectScanner",
    "scan_project",
]
