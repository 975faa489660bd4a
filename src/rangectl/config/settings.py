"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``RANGECTL_*`` prefix, ``__`` for nesting
  3. TOML file    — ``rangectl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from rangectl.config.discovery import find_config
from rangectl.config.models import SelectorConfig, StateConfig
from rangectl.domain.errors import DateRangeError
from rangectl.domain.locales import LocaleRegistry, LocaleTable


class ConfigError(DateRangeError, ValueError):
    """The config file could not be read."""

    code = "INVALID_CONFIG"


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``rangectl.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise ConfigError(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class RangeSettings(BaseSettings):
    """Settings for the rangectl CLI and library callers.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        lang: ``--lang`` override of ``selector.lang``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "RANGECTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    lang: str | None = None

    # --- TOML sections ---
    selector: SelectorConfig = Field(default_factory=SelectorConfig)
    state: StateConfig = Field(default_factory=StateConfig)
    locales: dict[str, LocaleTable] = Field(default_factory=dict)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
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
        start_dir: Path | None = None,
        **cli_flags: Any,
    ) -> RangeSettings:
        """Discover ``rangectl.toml`` and merge CLI flags on top.

        An explicit *config_path* that does not exist is ignored rather
        than searched around.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start_dir)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None

    @property
    def effective_lang(self) -> str:
        return self.lang or self.selector.lang

    def locale_registry(self) -> LocaleRegistry:
        """Shipped locales overlaid with any ``[locales.*]`` tables."""
        registry = LocaleRegistry.default()
        for lang, table in self.locales.items():
            registry.register(lang, table)
        return registry
