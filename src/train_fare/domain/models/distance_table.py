"""Distance table domain model."""

from dataclasses import dataclass

from train_fare.domain.models.station_segment import StationSegment


@dataclass(frozen=True)
class DistanceTable:
    """Ordered, immutable sequence of station segments.

    Station order is travel order: a journey is only defined from a station
    to itself or to a station further down the table.
    """

    segments: tuple[StationSegment, ...]

    @property
    def station_ids(self) -> tuple[str, ...]:
        """Station identifiers in table order."""
        return tuple(segment.station_id for segment in self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def contains(self, station_id: str) -> bool:
        """Check if the station is part of the table (exact, case-sensitive match)."""
        return station_id in self.station_ids

    def index_of(self, station_id: str) -> int | None:
        """Return the position of a station, or None when it is not in the table."""
        for index, segment in enumerate(self.segments):
            if segment.station_id == station_id:
                return index
        return None

    @classmethod
    def from_pairs(cls, pairs: list[tuple[str, float]]) -> "DistanceTable":
        """Build a table from (station_id, segment_km) pairs."""
        return cls(tuple(StationSegment(station_id, float(km)) for station_id, km in pairs))
