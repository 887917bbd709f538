"""Run configuration for the catalog transform."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from serial_catalog.core.errors import ConfigError
from serial_catalog.core.report import ReportStyle

log = logging.getLogger(__name__)

DEFAULT_INPUT_PATH = Path("amedia_tv_series.xml")
DEFAULT_OUTPUT_PATH = Path("output.txt")
DEFAULT_CROSSWALK_PATH = Path("imdbToKP.json")
DEFAULT_RECORD_STORE_PATH = Path("files.json")


class Settings(BaseModel):
    """Paths and optional stages of a run.

    Disabling both `use_crosswalk` and `emit_records` together with the
    ``brief`` report style gives the plain report-only transform.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_path: Path = Field(default=DEFAULT_INPUT_PATH, description="Catalog XML")
    output_path: Path = Field(default=DEFAULT_OUTPUT_PATH, description="Text report")
    crosswalk_path: Path = Field(
        default=DEFAULT_CROSSWALK_PATH, description="IMDb to Kinopoisk JSON map"
    )
    record_store_path: Path = Field(
        default=DEFAULT_RECORD_STORE_PATH, description="JSON lines record store"
    )
    input_encoding: str | None = Field(
        default=None, description="Encoding overriding the XML declaration"
    )
    use_crosswalk: bool = Field(default=True, description="Load the crosswalk")
    emit_records: bool = Field(default=True, description="Append episode records")
    report_style: ReportStyle = Field(default=ReportStyle.FULL)
    console: bool = Field(default=True, description="Mirror the report to stdout")

    @field_validator(
        "input_path",
        "output_path",
        "crosswalk_path",
        "record_store_path",
        mode="before",
    )
    @classmethod
    def _non_empty_path(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            raise ValueError("must be a non-empty path")
        return value

    @field_validator("input_encoding", mode="before")
    @classmethod
    def _blank_encoding_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def with_overrides(self, **values: Any) -> Settings:
        """Return a copy with the non-`None` values applied.

        Args:
            **values (Any): Field overrides by attribute name.

        Returns:
            Settings: Updated settings.

        Raises:
            ConfigError: If a name or value is invalid.
        """
        return _build(self, {k: v for k, v in values.items() if v is not None})


def load_settings(path: Path | str | None = None) -> Settings:
    """Load settings from a YAML file on top of the defaults.

    Keys may use dashes or underscores, e.g. ``input-path`` or ``input_path``.

    Args:
        path (Path | str | None): Optional YAML configuration file.

    Returns:
        Settings: Loaded settings.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    settings = Settings()
    if path is None:
        return settings

    path = Path(path)
    try:
        yaml = YAML(typ="safe")
        with path.open(encoding="utf-8") as f:
            payload = yaml.load(f) or {}
    except (OSError, YAMLError) as exc:
        raise ConfigError(f"Failed to load config file '{path}': {exc}") from exc

    if not isinstance(payload, Mapping):
        raise ConfigError(f"Expected a mapping at the root of '{path}'")
    log.debug("Loaded configuration from %s", path)
    return _build(settings, {str(k).replace("-", "_"): v for k, v in payload.items()})


def _build(base: Settings, values: Mapping[str, Any]) -> Settings:
    """Validate `values` and apply them to `base`."""
    try:
        return Settings.model_validate({**base.model_dump(), **values})
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings: {exc}") from exc
