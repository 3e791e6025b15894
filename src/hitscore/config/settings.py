"""HitscoreSettings: one frozen object for CLI flags, env vars and hitscore.toml.

Sources, strongest first: keyword arguments (the CLI flags), ``HITSCORE_*``
environment variables (``HITSCORE_CODEC__NAN_POLICY``), the TOML file, and
finally the defaults baked into :mod:`hitscore.config.models`.

The TOML file is the first of: the ``--config`` path, the file named by
``HITSCORE_CONFIG``, ``hitscore.toml`` in the working directory. A named
file that does not exist means "no file"; hitscore never searches parent
directories.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from hitscore.config.models import CodecConfig

CONFIG_FILENAME = "hitscore.toml"
CONFIG_ENV_VAR = "HITSCORE_CONFIG"


class ConfigFileError(ValueError):
    """The selected TOML file exists but cannot be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Invalid TOML in {path}: {reason}")


def resolve_config_path(explicit: str | None = None, cwd: Path | None = None) -> Path | None:
    """Pick the TOML file to read, or None when there is none."""
    named = explicit or os.environ.get(CONFIG_ENV_VAR)
    candidate = Path(named) if named else (cwd or Path.cwd()) / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


class HitscoreSettings(BaseSettings):
    """Settings for one hitscore invocation.

    Attributes:
        config_path: The TOML file that was read, or None.
        codec: The ``[codec]`` table.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="HITSCORE_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    codec: CodecConfig = Field(default_factory=CodecConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # The TOML path travels in as the config_path keyword itself.
        init_kwargs: dict[str, Any] = getattr(init_settings, "init_kwargs", {})
        toml_file = init_kwargs.get("config_path")
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=toml_file),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        cwd: Path | None = None,
        **flags: Any,
    ) -> HitscoreSettings:
        """Build settings for a CLI run.

        Raises:
            ConfigFileError: The chosen TOML file is malformed.
        """
        toml_path = resolve_config_path(config_path, cwd)
        try:
            return cls(config_path=toml_path, **flags)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigFileError(toml_path or Path(CONFIG_FILENAME), str(exc)) from exc
