from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults, EnvVars


@dataclass(frozen=True, slots=True)
class TimeshapeConfig:
    fallback_zone: str = Defaults.FALLBACK_ZONE
    us_zone: str = Defaults.US_ZONE
    eu_zone: str = Defaults.EU_ZONE
    smart_cutoff_days: int = Defaults.SMART_CUTOFF_DAYS
    invalid_marker: str = Defaults.INVALID_MARKER

    def __post_init__(self) -> None:
        for name in ("fallback_zone", "us_zone", "eu_zone"):
            if not getattr(self, name).strip():
                raise ValueError(f"{name} must be a non-empty timezone identifier")
        if self.smart_cutoff_days < 0:
            raise ValueError(
                f"smart_cutoff_days must not be negative, got {self.smart_cutoff_days}"
            )
        if not self.invalid_marker:
            raise ValueError("invalid_marker must be a non-empty string")

    @classmethod
    def from_env(cls) -> TimeshapeConfig:
        raw_marker = os.getenv(EnvVars.INVALID_MARKER)
        return cls(
            fallback_zone=os.getenv(EnvVars.FALLBACK_ZONE, Defaults.FALLBACK_ZONE),
            smart_cutoff_days=int(
                os.getenv(
                    EnvVars.SMART_CUTOFF_DAYS, str(Defaults.SMART_CUTOFF_DAYS)
                )
            ),
            invalid_marker=raw_marker or Defaults.INVALID_MARKER,
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> TimeshapeConfig:
        config = TimeshapeConfig.from_env()
        if config_file is None:
            config_file = Path("timeshape.toml")
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except (OSError, ValueError, tomllib.TOMLDecodeError) as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: TimeshapeConfig
    ) -> TimeshapeConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        zones = _get_table(data, "zones")
        display = _get_table(data, "display")
        fallback_zone = base_config.fallback_zone
        if value := zones.get("fallback"):
            fallback_zone = str(value)
        us_zone = base_config.us_zone
        if value := zones.get("us"):
            us_zone = str(value)
        eu_zone = base_config.eu_zone
        if value := zones.get("eu"):
            eu_zone = str(value)
        smart_cutoff_days = base_config.smart_cutoff_days
        if (value := display.get("smart_cutoff_days")) is not None:
            smart_cutoff_days = _coerce_int(value, key="display.smart_cutoff_days")
        invalid_marker = base_config.invalid_marker
        if value := display.get("invalid_marker"):
            invalid_marker = str(value)
        return TimeshapeConfig(
            fallback_zone=fallback_zone,
            us_zone=us_zone,
            eu_zone=eu_zone,
            smart_cutoff_days=smart_cutoff_days,
            invalid_marker=invalid_marker,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        return int(value)
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")
