"""Configuration loading.

Sources, strongest first:
1. Keyword overrides passed to `load_config`
2. Environment variables (AHKUNIT__TESTING__TIMEOUT_SEC and so on)
3. Project file (<root>/.ahkunit/config.yaml)
4. Global file (~/.config/ahkunit/config.yaml)
5. Model defaults

The two YAML files are overlaid section by section, so a project file that
sets only `testing.parallelism` keeps the global `testing.executable_path`.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from ahkunit.config.models import AhkUnitConfig, LoggingConfig, TestingConfig
from ahkunit.core.errors import ConfigError

GLOBAL_CONFIG_PATH = Path("~/.config/ahkunit/config.yaml").expanduser()
PROJECT_CONFIG_DIR = ".ahkunit"


def _read_layer(path: Path) -> dict[str, Any]:
    """Read one YAML config file. A missing or empty file is an empty layer."""
    if not path.is_file():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top level must be a mapping")
    return data


def _overlay(lower: dict[str, Any], upper: dict[str, Any]) -> dict[str, Any]:
    """Return `lower` with `upper` laid over it; nested mappings combine per key."""
    merged = dict(lower)
    for key, value in upper.items():
        below = merged.get(key)
        if isinstance(below, dict) and isinstance(value, dict):
            value = _overlay(below, value)
        merged[key] = value
    return merged


class _LayeredYamlSource(PydanticBaseSettingsSource):
    """Feeds the overlaid global and project files to pydantic-settings."""

    def __init__(self, settings_cls: type[BaseSettings], layers: list[Path]) -> None:
        super().__init__(settings_cls)
        data: dict[str, Any] = {}
        for path in layers:
            data = _overlay(data, _read_layer(path))
        self._data = data

    def get_field_value(
        self,
        field: Any,  # noqa: ARG002
        field_name: str,
    ) -> tuple[Any, str, bool]:
        value = self._data.get(field_name)
        return value, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return {name: value for name, value in self._data.items() if value is not None}


def _settings_for(layers: list[Path]) -> type[BaseSettings]:
    class AhkUnitSettings(BaseSettings):
        model_config = SettingsConfigDict(
            env_prefix="AHKUNIT__",
            env_nested_delimiter="__",
            case_sensitive=False,
        )

        logging: LoggingConfig = LoggingConfig()
        testing: TestingConfig = TestingConfig()

        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            return (init_settings, env_settings, _LayeredYamlSource(settings_cls, layers))

    return AhkUnitSettings


def config_layers(project_root: Path) -> list[Path]:
    """YAML files consulted for `project_root`, weakest first."""
    return [GLOBAL_CONFIG_PATH, project_root / PROJECT_CONFIG_DIR / "config.yaml"]


def load_config(project_root: Path | None = None, **overrides: Any) -> AhkUnitConfig:
    """Resolve the configuration for a project.

    Args:
        project_root: Directory holding `.ahkunit/config.yaml`. Defaults to
            the current working directory.
        **overrides: Section values that beat every other source.

    Raises:
        ConfigError: A file is not valid YAML, or a value fails validation.
    """
    settings_cls = _settings_for(config_layers(project_root or Path.cwd()))
    try:
        settings = settings_cls(**overrides)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise ConfigError.invalid_value(location, first.get("input"), first["msg"]) from e

    return AhkUnitConfig.model_validate(settings.model_dump())
