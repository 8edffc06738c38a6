"""Cumulative distance lookup over an ordered distance table."""

import logging

from train_fare.domain.errors import StationNotFoundError
from train_fare.domain.models import DistanceTable

logger = logging.getLogger(__name__)


class TableDistanceLookup:
    """Computes distances by summing segments of a DistanceTable."""

    def __init__(self, table: DistanceTable) -> None:
        """Initialize with the distance table to look stations up in."""
        self._table = table

    def station_ids(self) -> tuple[str, ...]:
        """Return all known station identifiers in travel order."""
        return self._table.station_ids

    def index_of(self, station_id: str) -> int:
        """Return the table position of a station.

        Raises:
            StationNotFoundError: If the station is not in the table.
        """
        index = self._table.index_of(station_id)
        if index is None:
            raise StationNotFoundError(station_id, self._table.station_ids)
        return index

    def distance(self, from_station: str, to_station: str) -> float:
        """Sum segment distances from the origin's index through the destination's index.

        The range is inclusive on both ends, so a station travelling to itself
        is charged its own segment. Travel against table order is not defined
        and yields 0.0.
        """
        from_index = self.index_of(from_station)
        to_index = self.index_of(to_station)

        if from_index > to_index:
            logger.debug(
                f"Reverse travel from {from_station} ({from_index}) to {to_station} ({to_index}), distance is 0"
            )
            return 0.0

        segments = self._table.segments[from_index : to_index + 1]
        return sum(segment.segment_km for segment in segments)

    def cumulative_distances(self) -> list[tuple[str, float]]:
        """Return each station with its distance from the first station, inclusive."""
        result: list[tuple[str, float]] = []
        total = 0.0
        for segment in self._table.segments:
            total += segment.segment_km
            result.append((segment.station_id, total))
        return result
