"""User configuration loaded from YAML."""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from docsift._errors import ConfigError
from docsift._store import DEFAULT_SUFFIXES
from docsift._tui._theme import StyleConfig

CONFIG_ENV_VAR = "DOCSIFT_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/docsift/config.yaml")


def _build_styles(data: Any) -> StyleConfig:
    if data is None:
        return StyleConfig()
    if not isinstance(data, dict):
        raise ConfigError("'styles' must be a mapping")
    known = {f.name for f in fields(StyleConfig)}
    unknown = set(data) - known
    if unknown:
        raise ConfigError(f"Unknown style keys: {', '.join(sorted(unknown))}")
    return StyleConfig(**{key: str(value) for key, value in data.items()})


@dataclass
class DocsiftConfig:
    """Settings for loading documents and drawing the TUI."""

    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_SUFFIXES))
    encoding: str = "utf-8"
    log_file: str | None = None
    styles: StyleConfig = field(default_factory=StyleConfig)

    @staticmethod
    def get_config_path() -> Path:
        """Return the config file location ($DOCSIFT_CONFIG wins)."""
        override = os.environ.get(CONFIG_ENV_VAR)
        if override:
            return Path(override).expanduser()
        return DEFAULT_CONFIG_PATH.expanduser()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DocsiftConfig:
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        extensions = data.get("extensions", list(DEFAULT_SUFFIXES))
        if isinstance(extensions, str):
            extensions = [extensions]
        if not isinstance(extensions, list) or not extensions:
            raise ConfigError("'extensions' must be a non-empty list")

        log_file = data.get("log_file")
        return cls(
            extensions=[str(ext) for ext in extensions],
            encoding=str(data.get("encoding", "utf-8")),
            log_file=str(log_file) if log_file else None,
            styles=_build_styles(data.get("styles")),
        )

    @classmethod
    def load(cls, path: Path | None = None) -> DocsiftConfig:
        """
        Load configuration, falling back to defaults if no file exists.

        Raises:
            ConfigError: If the file cannot be read or holds invalid values
        """
        config_path = path or cls.get_config_path()
        if not config_path.exists():
            return cls()

        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except OSError as e:
            raise ConfigError(f"Cannot read {config_path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"{config_path} must contain a mapping")
        return cls.from_dict(data)

    @classmethod
    def bootstrap(cls, path: Path | None = None) -> Path:
        """Write a default config file and return its path."""
        config_path = path or cls.get_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(yaml.safe_dump(cls().to_dict(), sort_keys=False), encoding="utf-8")
        return config_path

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
