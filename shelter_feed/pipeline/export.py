"""Shelter list export."""

from __future__ import annotations

import csv
import json
from pathlib import Path

from shelter_feed.common.models import Shelter


SHELTER_HEADERS = [
    "shelter_id",
    "name",
    "address",
    "city",
    "state",
    "zip",
    "status",
    "latitude",
    "longitude",
    "total_population",
    "ada_compliant",
    "wheelchair_accessible",
    "pet_accommodations",
    "source",
    "last_updated",
]


def _serialize_row(row: dict) -> dict:
    out = {}
    for key in SHELTER_HEADERS:
        value = row.get(key)
        out[key] = "" if value is None else value
    return out


def write_shelters_json(path: Path, shelters: list[Shelter]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump([shelter.to_dict() for shelter in shelters], f, ensure_ascii=False, indent=2)
        f.write("\n")
    return path


def write_shelters_csv(path: Path, shelters: list[Shelter]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=SHELTER_HEADERS, extrasaction="ignore")
        writer.writeheader()
        for shelter in shelters:
            writer.writerow(_serialize_row(shelter.to_dict()))
    return path
