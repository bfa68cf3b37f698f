"""Settings for applications embedding fuzzydate.

Priority chain (highest to lowest):
  1. Init kwargs  — values passed by the caller
  2. Env vars     — ``FUZZYDATE_*`` prefix
  3. TOML file    — explicit path given to :meth:`FuzzyDateSettings.load`
  4. Code defaults

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from fuzzydate.config.logging import configure_logging


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a TOML file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise ValueError(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class FuzzyDateSettings(BaseSettings):
    """Logging flags for fuzzydate, frozen after construction.

    Attributes:
        verbose: Log rejected inputs at DEBUG.
        log_json: Emit JSON lines instead of console output.
        config_path: TOML file the settings were read from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FUZZYDATE_",
    }

    verbose: bool = False
    log_json: bool = False
    config_path: Path | None = None

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
    def load(cls, config_path: str | Path | None = None, **overrides: Any) -> FuzzyDateSettings:
        """Build settings, reading *config_path* when it names an existing file.

        *overrides* take priority over env vars and the file.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None

    def configure_logging(self) -> None:
        """Apply :attr:`verbose` and :attr:`log_json` via :func:`configure_logging`."""
        configure_logging(verbose=self.verbose, log_json=self.log_json)
