"""Board settings: enabled CLI flags, then ``PRJBOARD_*`` env vars, then
``prjboard.toml``, then the section model defaults.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from prjboard.config.discovery import find_config
from prjboard.config.models import UiConfig, ValidationConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Sections of one ``prjboard.toml``; a missing file contributes nothing."""

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
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# settings_customise_sources is a classmethod with no per-call arguments.
_tls = threading.local()


class BoardSettings(BaseSettings):
    """Frozen settings shared by every prjboard command.

    Nested sections take env overrides as ``PRJBOARD_UI__HOST_ID``.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PRJBOARD_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    ui: UiConfig = Field(default_factory=UiConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Drop dotenv and secrets; read TOML below env vars."""
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
    ) -> BoardSettings:
        """Settings for one CLI invocation.

        An explicit *config_path* that names no file yields defaults; without
        one, :func:`find_config` searches from *start*.
        Only flags that were switched on are forwarded: an unset boolean flag
        arrives as False and must not mask ``PRJBOARD_*`` or the TOML file.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            flags = {key: value for key, value in cli_flags.items() if value}
            return cls(config_path=toml_path, **flags)
        finally:
            _tls.toml_path = None
