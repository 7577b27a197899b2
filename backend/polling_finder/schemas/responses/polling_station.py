from dataclasses import dataclass
import math

from polling_finder.core.constants import LATITUDE_BOUNDS, LONGITUDE_BOUNDS
from polling_finder.enums.matched_by import MatchedBy
from polling_finder.schemas.responses.geojson import Point
from pydantic import BaseModel


def _within(value: float | None, bounds: tuple[float, float]) -> bool:
    if value is None or not math.isfinite(value):
        return False
    low, high = bounds
    return low <= value <= high


@dataclass(frozen=True)
class PollingStationRecord:
    id: int
    postal_code: str
    settlement: str
    address: str
    station_number: str
    district: str | None
    latitude: float | None
    longitude: float | None

    @property
    def coordinates(self) -> tuple[float, float] | None:
        if self.latitude is None or self.longitude is None:
            return None
        return self.latitude, self.longitude

    @property
    def has_valid_coordinates(self) -> bool:
        """Only stations that can be put on a map are eligible matches."""
        return _within(self.latitude, LATITUDE_BOUNDS) and _within(self.longitude, LONGITUDE_BOUNDS)


class PollingStationMatch(BaseModel):
    id: int
    postal_code: str
    settlement: str
    address: str
    station_number: str
    district: str | None
    latitude: float
    longitude: float
    matched_by: MatchedBy
    location: Point
