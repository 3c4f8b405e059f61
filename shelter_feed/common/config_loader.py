"""Configuration loading and validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from shelter_feed.common.constants import (
    ARCGIS_SHELTERS_PARAMS,
    ARCGIS_SHELTERS_URL,
    SOURCE_NAME,
)
from shelter_feed.common.errors import ConfigError
from shelter_feed.common.http import TimeoutConfig
from shelter_feed.common.schema import validate_feed_config


@dataclass(frozen=True)
class SourceConfig:
    name: str = SOURCE_NAME
    url: str = ARCGIS_SHELTERS_URL
    params: dict[str, str] = field(default_factory=lambda: dict(ARCGIS_SHELTERS_PARAMS))


@dataclass(frozen=True)
class FeedConfig:
    source: SourceConfig = field(default_factory=SourceConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)


def _read_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _param_value(value: object) -> str:
    # ArcGIS expects lowercase booleans; YAML parses unquoted true/false to bool.
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _load_yaml_with_overlay(path: Path, overlay_path: Path | None) -> dict:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    base = _read_yaml(path)
    if overlay_path is None or not overlay_path.exists():
        return base
    overlay = _read_yaml(overlay_path)
    if overlay is None:
        return base
    if not isinstance(overlay, dict):
        raise ConfigError(f"Overlay config must be a mapping: {overlay_path}")
    return _deep_merge(base, overlay)


def load_feed_config(
    config_path: Path,
    *,
    allow_unknown: bool = False,
    overlay_config_path: Path | None = None,
) -> FeedConfig:
    cfg = validate_feed_config(
        _load_yaml_with_overlay(config_path, overlay_config_path),
        allow_unknown=allow_unknown,
    )
    source = cfg["source"]
    http = cfg["http"]
    return FeedConfig(
        source=SourceConfig(
            name=str(source["name"]),
            url=source["url"],
            params={str(k): _param_value(v) for k, v in source["params"].items()},
        ),
        timeout=TimeoutConfig(
            connect=float(http["connect_timeout"]),
            read=float(http["read_timeout"]),
        ),
    )
