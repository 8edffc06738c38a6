"""Domain errors for fare calculation."""


class FareError(Exception):
    """Base class for errors raised while computing a fare."""


class StationNotFoundError(FareError):
    """Raised when a station identifier is not part of the distance table."""

    def __init__(self, station_id: str, known_stations: tuple[str, ...] = ()) -> None:
        self.station_id = station_id
        self.known_stations = known_stations
        message = f"Station '{station_id}' not found"
        if known_stations:
            message += f" (known stations: {', '.join(known_stations)})"
        super().__init__(message)


class InvalidFareAmountError(FareError, ValueError):
    """Raised when a fee entered by the user is not a finite number."""

    def __init__(self, raw_value: str) -> None:
        self.raw_value = raw_value
        super().__init__(f"'{raw_value}' is not a valid fare amount")
