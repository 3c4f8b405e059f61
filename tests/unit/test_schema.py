import copy

import pytest

from shelter_feed.common.errors import ConfigError
from shelter_feed.common.schema import validate_feed_config


BASE_CONFIG = {
    "source": {
        "name": "FEMA / ARC (National Shelter System)",
        "url": "https://example.test/FeatureServer/0/query",
        "params": {"where": "1=1", "f": "geojson"},
    },
    "http": {"connect_timeout": 5, "read_timeout": 30},
}


def test_validate_feed_config_accepts_valid_shape():
    validated = validate_feed_config(copy.deepcopy(BASE_CONFIG))
    assert validated["source"]["params"]["f"] == "geojson"


def test_validate_feed_config_rejects_unknown_key_by_default():
    bad = copy.deepcopy(BASE_CONFIG)
    bad["unexpected"] = True
    with pytest.raises(ConfigError):
        validate_feed_config(bad)


def test_validate_feed_config_allows_unknown_when_enabled():
    okay = copy.deepcopy(BASE_CONFIG)
    okay["extra"] = 1
    okay["http"]["pool_size"] = 4
    validate_feed_config(okay, allow_unknown=True)


def test_validate_feed_config_rejects_missing_section():
    bad = copy.deepcopy(BASE_CONFIG)
    del bad["http"]
    with pytest.raises(ConfigError, match="http"):
        validate_feed_config(bad)


@pytest.mark.parametrize("url", ["ftp://example.test", "", 12])
def test_validate_feed_config_rejects_bad_url(url):
    bad = copy.deepcopy(BASE_CONFIG)
    bad["source"]["url"] = url
    with pytest.raises(ConfigError):
        validate_feed_config(bad)


@pytest.mark.parametrize("value", [0, -1, "10", True, None])
def test_validate_feed_config_rejects_bad_timeouts(value):
    bad = copy.deepcopy(BASE_CONFIG)
    bad["http"]["read_timeout"] = value
    with pytest.raises(ConfigError):
        validate_feed_config(bad)


def test_validate_feed_config_rejects_non_mapping():
    with pytest.raises(ConfigError):
        validate_feed_config(["source", "http"])


@pytest.mark.parametrize("value", [None, ["a"], {"nested": 1}])
def test_validate_feed_config_rejects_non_scalar_params(value):
    bad = copy.deepcopy(BASE_CONFIG)
    bad["source"]["params"]["outFields"] = value
    with pytest.raises(ConfigError, match="outFields"):
        validate_feed_config(bad)
