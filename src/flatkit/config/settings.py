"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``FLATKIT_*`` prefix
  3. TOML file    — ``--config``, else ``$FLATKIT_CONFIG``, else the nearest
     ``flatkit.toml`` at or above the working directory
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from flatkit.config.models import FlattenConfig, OutputConfig

CONFIG_FILENAME = "flatkit.toml"
CONFIG_ENV_VAR = "FLATKIT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest flatkit.toml in *start* (default: cwd) or its parents."""
    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config_path(config_path: str | None, start: Path | None = None) -> Path | None:
    """Pick the TOML file to load.

    A path named explicitly (``--config`` or ``$FLATKIT_CONFIG``) must
    exist; only walk-up discovery may come back empty.

    Raises:
        click.ClickException: If an explicitly named file is missing.
    """
    explicit = config_path or os.environ.get(CONFIG_ENV_VAR)
    if not explicit:
        return find_config(start)
    path = Path(explicit)
    if not path.is_file():
        raise click.ClickException(f"Config file not found: {path}")
    return path


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feed the sections of a resolved ``flatkit.toml`` into pydantic-settings."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class FlatkitSettings(BaseSettings):
    """Unified settings for the flatkit CLI.

    Merges CLI flags, environment variables, TOML config sections,
    and code-baked defaults into a single frozen object.

    Attributes:
        config_path: The TOML file that was loaded, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FLATKIT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    flatten: FlattenConfig = Field(default_factory=FlattenConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> FlatkitSettings:
        """Construct settings from CLI invocation.

        The TOML file comes from :func:`resolve_config_path`; CLI flags are
        merged as highest-priority overrides.
        """
        toml_path = resolve_config_path(config_path, start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
