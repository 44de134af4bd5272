"""DomSettings: one frozen object built from every configuration layer.

Layers, first match wins: keyword arguments from the CLI, ``DOMBLOCK_*``
environment variables (``__`` separates section and key), the TOML file
and the defaults on the section models. The TOML layer is a custom
pydantic-settings source fed by :func:`find_config` or by ``-c``.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from domblock.config.discovery import find_config
from domblock.config.models import BlocklistConfig, NormalizeConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings layer holding the parsed ``domblock.toml`` document."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is None:
            return
        with toml_path.open("rb") as f:
            try:
                self._data = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path chosen by from_cli, read by settings_customise_sources.
_tls = threading.local()


class DomSettings(BaseSettings):
    """Settings shared by every command through :class:`AppContext`.

    Attributes:
        config_path: The TOML file that was loaded, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DOMBLOCK_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # output and logging flags
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # TOML sections
    normalize: NormalizeConfig = Field(default_factory=NormalizeConfig)
    blocklist: BlocklistConfig = Field(default_factory=BlocklistConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
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
    ) -> DomSettings:
        """Construct settings from a CLI invocation.

        An explicit *config_path* must name a file. Without one, this
        discovers ``domblock.toml`` by walking up from *start* (default
        cwd). CLI flags are merged as highest-priority overrides.
        """
        toml_path: Path | None
        if config_path:
            toml_path = Path(config_path)
            if not toml_path.is_file():
                msg = f"Config file not found: {toml_path}"
                raise click.ClickException(msg)
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
