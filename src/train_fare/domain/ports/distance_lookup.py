"""Distance lookup port."""

from typing import Protocol


class DistanceLookup(Protocol):
    """Port for computing the travelled distance between two stations."""

    def distance(self, from_station: str, to_station: str) -> float:
        """Return the cumulative distance in km between two stations.

        Raises:
            StationNotFoundError: If either station is unknown.
        """
        ...

    def station_ids(self) -> tuple[str, ...]:
        """Return all known station identifiers in travel order."""
        ...
