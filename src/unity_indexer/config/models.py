"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (UNITY_INDEXER__SECTION__KEY)
3. YAML config (--config PATH, or <project>/.unity-indexer.yaml)
4. Built-in defaults (this file)

Environment Variable Format:
    UNITY_INDEXER__<SECTION>__<KEY>=<VALUE>

Examples:
    UNITY_INDEXER__LOGGING__LEVEL=DEBUG
    UNITY_INDEXER__INDEXER__MAX_KEYWORDS=12
"""

from pathlib import Path, PurePosixPath
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Unity message methods the engine calls on MonoBehaviours.
DEFAULT_LIFECYCLE_CALLBACKS: frozenset[str] = frozenset(
    (
        "Awake",
        "Start",
        "Update",
        "FixedUpdate",
        "LateUpdate",
        "OnEnable",
        "OnDisable",
        "OnDestroy",
        "OnCollisionEnter",
        "OnCollisionExit",
        "OnCollisionStay",
        "OnTriggerEnter",
        "OnTriggerExit",
        "OnTriggerStay",
        "OnMouseDown",
        "OnMouseUp",
        "OnMouseEnter",
        "OnMouseExit",
        "OnGUI",
        "OnApplicationQuit",
        "OnApplicationPause",
        "OnBecameVisible",
        "OnBecameInvisible",
    )
)


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        UNITY_INDEXER__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. WARNING shows skipped files; DEBUG logs every parsed file.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class IndexerConfig(BaseModel):
    """Scanner, parser and renderer settings.

    Built once per run and shared read-only by every component.

    Env vars:
        UNITY_INDEXER__INDEXER__SOURCE_DIR: Source container under the project root
        UNITY_INDEXER__INDEXER__SOURCE_EXTENSION: Source file extension
        UNITY_INDEXER__INDEXER__MAX_KEYWORDS: Keywords shown per function
    """

    model_config = ConfigDict(frozen=True)

    source_dir: str = Field(
        default="Assets",
        description="Directory under the project root that holds the scripts.",
    )
    source_extension: str = Field(
        default=".cs",
        description="Only files ending in this extension are parsed (.meta sidecars never match).",
    )
    output_file: str = Field(
        default="unity-functions-index.md",
        description="Markdown file written when no output path is given.",
    )
    lifecycle_callbacks: frozenset[str] = Field(
        default=DEFAULT_LIFECYCLE_CALLBACKS,
        description="Method names the engine invokes by itself (exact match).",
    )
    coroutine_marker: str = Field(
        default="IEnumerator",
        description="Return type substring that marks a coroutine.",
    )
    encoding: str = Field(
        default="utf-8-sig",
        description="Text encoding of source files. Undecodable files are skipped.",
    )
    max_keywords: int = Field(
        default=8,
        description="Keywords listed per function in the Markdown index.",
    )

    @field_validator("source_dir")
    @classmethod
    def validate_source_dir(cls, v: str) -> str:
        parts = PurePosixPath(v.replace("\\", "/")).parts
        if len(parts) != 1 or parts[0] in (".", "..", "/"):
            raise ValueError(f"source_dir must be a single directory name, got {v!r}")
        return v

    @field_validator("source_extension")
    @classmethod
    def validate_source_extension(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2:
            raise ValueError(f"source_extension must look like '.cs', got {v!r}")
        return v

    @field_validator("max_keywords")
    @classmethod
    def validate_max_keywords(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_keywords must be at least 1, got {v}")
        return v


class UnityIndexerConfig(BaseModel):
    """Root configuration model for type hints."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    indexer: IndexerConfig = Field(default_factory=IndexerConfig)
