"""Distance table loader."""

import logging
import math

from train_fare.adapters.config.app_config import AppConfig
from train_fare.adapters.config.default_table import DEFAULT_STATIONS
from train_fare.domain.models import DistanceTable, StationSegment

logger = logging.getLogger(__name__)


class DistanceTableLoader:
    """Loads the station distance table from app config."""

    @staticmethod
    def load(config: AppConfig) -> DistanceTable:
        """Load the distance table, falling back to the built-in one."""
        stations_data = config.get_stations_config()
        if stations_data is None:
            logger.info(f"Using built-in distance table with {len(DEFAULT_STATIONS)} stations")
            return DistanceTable.from_pairs(DEFAULT_STATIONS)

        if not stations_data:
            raise ValueError("TOML config 'stations' must not be empty")

        segments: list[StationSegment] = []
        seen: set[str] = set()
        for position, station_data in enumerate(stations_data, 1):
            if not isinstance(station_data, dict):
                raise ValueError(f"Station entry {position} must be a table")

            station_id = str(station_data.get("id", "")).strip()
            if not station_id:
                raise ValueError(f"Station entry {position} has no 'id'")
            if station_id in seen:
                raise ValueError(f"Duplicate station id: {station_id}")

            raw_km = station_data.get("segment_km", 0.0)
            if isinstance(raw_km, bool):
                raise ValueError(f"Station '{station_id}' has an invalid 'segment_km'")
            try:
                segment_km = float(raw_km)
            except (ValueError, TypeError) as e:
                raise ValueError(f"Station '{station_id}' has an invalid 'segment_km'") from e
            if not math.isfinite(segment_km):
                raise ValueError(f"Station '{station_id}' has a non-finite 'segment_km'")
            if segment_km < 0:
                raise ValueError(f"Station '{station_id}' has a negative 'segment_km'")

            seen.add(station_id)
            segments.append(StationSegment(station_id=station_id, segment_km=segment_km))

        logger.info(f"Loaded distance table with {len(segments)} stations from {config.config_file}")
        return DistanceTable(tuple(segments))
