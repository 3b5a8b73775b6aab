"""Configuration loader for the lkecred CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from core.params import PROFILE_REALTIME, PROFILES

DEFAULTS = {
    "default_profile": PROFILE_REALTIME,
    "default_format": "json",
    "region": None,
    "endpoint": None,
}


@dataclass(slots=True)
class Settings:
    default_profile: str = DEFAULTS["default_profile"]
    default_format: str = DEFAULTS["default_format"]
    region: str | None = DEFAULTS["region"]
    endpoint: str | None = DEFAULTS["endpoint"]

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "Settings":
        profile = data.get("default_profile", DEFAULTS["default_profile"])
        if profile not in PROFILES:
            raise ValueError(f"default_profile must be one of: {', '.join(sorted(PROFILES))}")
        return cls(
            default_profile=profile,
            default_format=data.get("default_format", DEFAULTS["default_format"]),
            region=data.get("region", DEFAULTS["region"]),
            endpoint=data.get("endpoint", DEFAULTS["endpoint"]),
        )

    def merge_cli(self, format_override: str | None = None, profile_override: str | None = None) -> "Settings":
        return Settings(
            default_profile=profile_override or self.default_profile,
            default_format=format_override or self.default_format,
            region=self.region,
            endpoint=self.endpoint,
        )


def load_settings(path: Path) -> Settings:
    if not path.exists():
        return Settings()

    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}

    if not isinstance(data, dict):
        raise ValueError("Configuration file must be a mapping of keys to values.")

    return Settings.from_mapping(data)


__all__ = ["Settings", "load_settings"]
