"""Configuration loading with pydantic-settings.

Supports loading configuration from multiple sources with precedence:
1. Direct kwargs (highest priority)
2. Environment variables (UNITY_INDEXER__SECTION__KEY)
3. YAML config file (explicit path, else <project>/.unity-indexer.yaml)
4. Built-in defaults (lowest priority)
"""

from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from unity_indexer.config.models import IndexerConfig, LoggingConfig, UnityIndexerConfig
from unity_indexer.core.errors import ConfigError

PROJECT_CONFIG_NAME = ".unity-indexer.yaml"

log = structlog.get_logger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError.parse_error(str(path), f"cannot read file: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top level must be a mapping")
    return data


class _YamlSource(PydanticBaseSettingsSource):
    """Settings source that reads from pre-loaded YAML config."""

    def __init__(self, settings_cls: type[BaseSettings], yaml_config: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._yaml_config = yaml_config

    def get_field_value(
        self,
        field: Any,  # noqa: ARG002
        field_name: str,
    ) -> tuple[Any, str, bool]:
        val = self._yaml_config.get(field_name)
        return val, field_name, val is not None

    def __call__(self) -> dict[str, Any]:
        return self._yaml_config


def _make_settings_class(yaml_config: dict[str, Any]) -> type[BaseSettings]:
    """Create a Settings class bound to one YAML payload."""

    class UnityIndexerSettings(BaseSettings):
        """Root config. Env vars: UNITY_INDEXER__LOGGING__LEVEL, etc."""

        model_config = SettingsConfigDict(
            env_prefix="UNITY_INDEXER__",
            env_nested_delimiter="__",
            case_sensitive=False,
        )

        logging: LoggingConfig = LoggingConfig()
        indexer: IndexerConfig = IndexerConfig()

        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            # Precedence (first wins): init kwargs > env vars > yaml file
            return (init_settings, env_settings, _YamlSource(settings_cls, yaml_config))

    return UnityIndexerSettings


def load_config(
    project_root: Path | None = None,
    config_path: Path | None = None,
    **kwargs: Any,
) -> UnityIndexerConfig:
    """Load config: defaults < YAML file < env vars < kwargs.

    Args:
        project_root: Unity project root; its .unity-indexer.yaml is used
                      when no explicit config_path is given.
        config_path: Explicit YAML config file. Must exist.
        **kwargs: Override values (highest precedence).

    Returns:
        Fully resolved configuration object.

    Raises:
        ConfigError: On a missing explicit file, invalid YAML, or validation errors.
    """
    if config_path is not None:
        if not config_path.is_file():
            raise ConfigError.file_not_found(str(config_path))
        source: Path | None = config_path
    elif project_root is not None:
        source = project_root / PROJECT_CONFIG_NAME
    else:
        source = None

    yaml_config = _load_yaml(source) if source is not None else {}

    settings_cls = _make_settings_class(yaml_config)
    try:
        config = settings_cls(**kwargs)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ConfigError.invalid_value(field, err.get("input"), err["msg"]) from e

    log.debug("config_loaded", source=str(source) if yaml_config else None)
    return config  # type: ignore[return-value]
