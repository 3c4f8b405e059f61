from pathlib import Path

import pytest

from shelter_feed.common.config_loader import FeedConfig, load_feed_config
from shelter_feed.common.constants import ARCGIS_SHELTERS_PARAMS, ARCGIS_SHELTERS_URL
from shelter_feed.common.errors import ConfigError

BASE_YAML = """source:
  name: "FEMA / ARC (National Shelter System)"
  url: "https://example.test/FeatureServer/0/query"
  params:
    where: "1=1"
    outFields: "*"
    returnGeometry: "true"
    f: geojson
http:
  connect_timeout: 20
  read_timeout: 120
"""


def test_load_feed_config_from_repo_config_dir():
    cfg = load_feed_config(Path("config") / "shelter_feed.yml")
    assert cfg.source.url == ARCGIS_SHELTERS_URL
    assert cfg.source.params == ARCGIS_SHELTERS_PARAMS


def test_default_feed_config_matches_constants():
    cfg = FeedConfig()
    assert cfg.source.url == ARCGIS_SHELTERS_URL
    assert cfg.source.params == ARCGIS_SHELTERS_PARAMS
    assert (cfg.timeout.connect, cfg.timeout.read) == (20.0, 120.0)


def test_load_feed_config_applies_overlay_values(tmp_path: Path):
    base = tmp_path / "shelter_feed.yml"
    overlay = tmp_path / "overlay.yml"
    base.write_text(BASE_YAML, encoding="utf-8")
    overlay.write_text("http:\n  read_timeout: 15\nsource:\n  params:\n    where: \"state='FL'\"\n", encoding="utf-8")

    cfg = load_feed_config(base, overlay_config_path=overlay)

    assert cfg.timeout.read == 15.0
    assert cfg.timeout.connect == 20.0
    assert cfg.source.params["where"] == "state='FL'"
    assert cfg.source.params["f"] == "geojson"


def test_load_feed_config_ignores_empty_overlay_file(tmp_path: Path):
    base = tmp_path / "shelter_feed.yml"
    overlay = tmp_path / "overlay.yml"
    base.write_text(BASE_YAML, encoding="utf-8")
    overlay.write_text("", encoding="utf-8")

    cfg = load_feed_config(base, overlay_config_path=overlay)

    assert cfg.timeout.read == 120.0


def test_load_feed_config_rejects_non_mapping_overlay(tmp_path: Path):
    base = tmp_path / "shelter_feed.yml"
    overlay = tmp_path / "overlay.yml"
    base.write_text(BASE_YAML, encoding="utf-8")
    overlay.write_text("- not\n- a\n- mapping\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_feed_config(base, overlay_config_path=overlay)


def test_load_feed_config_missing_file(tmp_path: Path):
    with pytest.raises(ConfigError):
        load_feed_config(tmp_path / "missing.yml")


def test_load_feed_config_renders_yaml_booleans_lowercase(tmp_path: Path):
    base = tmp_path / "shelter_feed.yml"
    overlay = tmp_path / "overlay.yml"
    base.write_text(BASE_YAML, encoding="utf-8")
    overlay.write_text("source:\n  params:\n    returnGeometry: true\n    returnZ: false\n", encoding="utf-8")

    cfg = load_feed_config(base, overlay_config_path=overlay)

    assert cfg.source.params["returnGeometry"] == "true"
    assert cfg.source.params["returnZ"] == "false"
