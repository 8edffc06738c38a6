"""Domain models for train fare calculation."""

from train_fare.domain.models.distance_table import DistanceTable
from train_fare.domain.models.fare_quote import FareQuote
from train_fare.domain.models.fare_rule import DistanceRule, FareRule, OtherRule, VipRule
from train_fare.domain.models.fare_step import FareStep
from train_fare.domain.models.station_segment import StationSegment

__all__ = [
    "DistanceRule",
    "DistanceTable",
    "FareQuote",
    "FareRule",
    "FareStep",
    "OtherRule",
    "StationSegment",
    "VipRule",
]
