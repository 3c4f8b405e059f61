"""Normalized shelter record."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Shelter:
    shelter_id: Any
    name: str
    address: str
    city: str
    state: str
    zip: str
    status: str
    latitude: float
    longitude: float
    total_population: int | float | None
    ada_compliant: Any | None
    wheelchair_accessible: Any | None
    pet_accommodations: Any | None
    source: str
    last_updated: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
