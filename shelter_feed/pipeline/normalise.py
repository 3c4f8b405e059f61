"""GeoJSON feature to Shelter normalisation.

Geometry coordinates are the authoritative location. The ``latitude`` and
``longitude`` property fields published by the feed are often null or stale
and are never read. Features without usable point geometry are dropped
without raising.
"""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Any

from shelter_feed.common.constants import DEFAULT_SHELTER_NAME, SOURCE_NAME, UNKNOWN_STATUS
from shelter_feed.common.errors import InvalidFormatError
from shelter_feed.common.models import Shelter
from shelter_feed.common.time_utils import utc_timestamp_iso

logger = logging.getLogger(__name__)

_PASSTHROUGH_STATUSES = {"OPEN", "CLOSED"}


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def _coalesce(value: Any, default: Any) -> Any:
    return default if value is None else value


def _status(value: object) -> str:
    if isinstance(value, str) and value in _PASSTHROUGH_STATUSES:
        return value
    return UNKNOWN_STATUS


def _point_coordinates(geometry: object) -> tuple[float, float] | None:
    """Return ``(longitude, latitude)`` for a valid Point geometry."""
    if not isinstance(geometry, dict) or geometry.get("type") != "Point":
        return None
    coords = geometry.get("coordinates")
    if not isinstance(coords, (list, tuple)) or len(coords) != 2:
        return None
    longitude, latitude = coords
    if not (_is_number(longitude) and _is_number(latitude)):
        return None
    return longitude, latitude


def extract_features(payload: object) -> list:
    if not isinstance(payload, dict) or not isinstance(payload.get("features"), list):
        raise InvalidFormatError("Invalid GeoJSON response from ArcGIS")
    return payload["features"]


def exceeded_transfer_limit(payload: dict) -> bool:
    """ArcGIS flags truncated query results with ``exceededTransferLimit``."""
    if payload.get("exceededTransferLimit") is True:
        return True
    properties = payload.get("properties")
    return isinstance(properties, dict) and properties.get("exceededTransferLimit") is True


def normalize_feature(feature: object, *, last_updated: str) -> Shelter | None:
    if not isinstance(feature, dict):
        return None

    point = _point_coordinates(feature.get("geometry"))
    if point is None:
        logger.debug("dropping feature without usable point geometry: id=%s", feature.get("id"))
        return None
    longitude, latitude = point

    props = feature.get("properties")
    if not isinstance(props, dict):
        props = {}

    population = props.get("total_population")

    return Shelter(
        shelter_id=props.get("shelter_id"),
        name=_coalesce(props.get("shelter_name"), DEFAULT_SHELTER_NAME),
        address=_coalesce(props.get("address"), ""),
        city=_coalesce(props.get("city"), ""),
        state=_coalesce(props.get("state"), ""),
        zip=_coalesce(props.get("zip"), ""),
        status=_status(props.get("shelter_status")),
        latitude=latitude,
        longitude=longitude,
        total_population=population if _is_number(population) else None,
        ada_compliant=props.get("ada_compliant"),
        wheelchair_accessible=props.get("wheelchair_accessible"),
        pet_accommodations=props.get("pet_accommodations_code"),
        source=SOURCE_NAME,
        last_updated=last_updated,
    )


def normalize_features(payload: object, *, now: str | None = None) -> list[Shelter]:
    features = extract_features(payload)
    last_updated = now or utc_timestamp_iso()

    shelters: list[Shelter] = []
    for feature in features:
        shelter = normalize_feature(feature, last_updated=last_updated)
        if shelter is not None:
            shelters.append(shelter)
    return shelters
