"""Station segment domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StationSegment:
    """A station and the distance of the segment that belongs to it."""

    station_id: str
    segment_km: float
