"""TOML configuration loading for dotlink."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from tomli_w import dump as toml_dump

from .errors import ConfigError, MissingConfigError
from .mappings import MappingSet

logger = logging.getLogger(__name__)

CONFIG_VERSION = 1
CONFIG_DIRNAME = "dotfiles"
DEFAULT_CONFIG_FILENAME = "config.toml"


class ConfigDocument(BaseModel):
    """Schema of the on-disk configuration file."""

    model_config = ConfigDict(extra="forbid", strict=True)

    config_version: int
    mappings: list[str] = Field(default_factory=list)


def user_config_dir(home: Path) -> Path:
    """Return the user config directory relative to ``home`` (usually ``.config``)."""

    raw = os.environ.get("XDG_CONFIG_HOME")
    config_dir = Path(raw).expanduser() if raw else home / ".config"
    if not config_dir.is_absolute():
        raise ConfigError(f"Could not resolve user config directory: '{config_dir}' is not absolute")
    try:
        return config_dir.relative_to(home)
    except ValueError as exc:
        raise ConfigError(
            f"Could not resolve user config directory: '{config_dir}' is not inside the home directory '{home}'"
        ) from exc


def config_file_path(repo_root: Path, home: Path) -> Path:
    """Return where the config lives inside the repository.

    The config itself is never linked: it is read from
    ``<repo_root>/<user config dir>/dotfiles/config.toml``.
    """

    return repo_root / user_config_dir(home) / CONFIG_DIRNAME / DEFAULT_CONFIG_FILENAME


class AppConfig:
    """Parsed configuration: a format version and the validated mappings."""

    def __init__(
        self,
        path: Path,
        mappings: MappingSet | None = None,
        *,
        config_version: int = CONFIG_VERSION,
    ) -> None:
        self.path = path
        self.config_version = config_version
        self.mappings = mappings if mappings is not None else MappingSet()

    @classmethod
    def load(cls, path: Path) -> "AppConfig":
        if not path.exists():
            raise MissingConfigError(path)

        try:
            with path.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Failed to parse config file '{path}': {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"Could not read config file '{path}': {exc.strerror or exc}") from exc

        try:
            document = ConfigDocument.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(f"Invalid config file '{path}': {_format_validation_error(exc)}") from exc

        mappings = MappingSet.from_strings(document.mappings)
        logger.debug("Loaded %d mapping(s) from %s", len(mappings), path)
        return cls(path, mappings, config_version=document.config_version)

    def save(self) -> None:
        """Overwrite the config file, creating parent directories as needed."""

        payload = ConfigDocument(
            config_version=self.config_version,
            mappings=self.mappings.as_strings(),
        ).model_dump()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("wb") as handle:
                toml_dump(payload, handle)
        except OSError as exc:
            raise ConfigError(f"Could not write config file '{self.path}': {exc.strerror or exc}") from exc
        logger.debug("Wrote %d mapping(s) to %s", len(self.mappings), self.path)


def _format_validation_error(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        messages.append(f"{location}: {error['msg']}")
    return "; ".join(messages)
