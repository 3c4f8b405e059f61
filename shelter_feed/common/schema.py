"""Minimal strict schemas for YAML config validation."""

from __future__ import annotations

from shelter_feed.common.errors import ConfigError


def _assert_mapping(obj: object, ctx: str) -> None:
    if not isinstance(obj, dict):
        raise ConfigError(f"{ctx} must be a mapping")


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def _assert_positive_number(value: object, ctx: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigError(f"{ctx} must be a positive number")


def validate_feed_config(cfg: object, *, allow_unknown: bool = False) -> dict:
    _assert_mapping(cfg, "feed config")
    top_required = {"source", "http"}
    _assert_required_keys(cfg, top_required, "feed config")
    _assert_no_unknown_keys(cfg, top_required, "feed config", allow_unknown)

    source = cfg["source"]
    _assert_mapping(source, "source")
    _assert_required_keys(source, {"name", "url", "params"}, "source")
    _assert_no_unknown_keys(source, {"name", "url", "params"}, "source", allow_unknown)
    if not isinstance(source["url"], str) or not source["url"].startswith(("http://", "https://")):
        raise ConfigError("source.url must be an http(s) URL")
    _assert_mapping(source["params"], "source.params")
    for key, value in source["params"].items():
        if not isinstance(value, (str, int, float, bool)):
            raise ConfigError(f"source.params.{key} must be a scalar value")

    http = cfg["http"]
    _assert_mapping(http, "http")
    _assert_required_keys(http, {"connect_timeout", "read_timeout"}, "http")
    _assert_no_unknown_keys(http, {"connect_timeout", "read_timeout"}, "http", allow_unknown)
    _assert_positive_number(http["connect_timeout"], "http.connect_timeout")
    _assert_positive_number(http["read_timeout"], "http.read_timeout")

    return cfg
