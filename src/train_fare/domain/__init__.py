"""Domain layer - core business logic and models."""

from train_fare.domain.errors import FareError, InvalidFareAmountError, StationNotFoundError
from train_fare.domain.models import (
    DistanceRule,
    DistanceTable,
    FareQuote,
    FareRule,
    FareStep,
    OtherRule,
    StationSegment,
    VipRule,
)
from train_fare.domain.ports import DistanceLookup, FarePrompter

__all__ = [
    "DistanceLookup",
    "DistanceRule",
    "DistanceTable",
    "FareError",
    "FarePrompter",
    "FareQuote",
    "FareRule",
    "FareStep",
    "InvalidFareAmountError",
    "OtherRule",
    "StationNotFoundError",
    "StationSegment",
    "VipRule",
]
