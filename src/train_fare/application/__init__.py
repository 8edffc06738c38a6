"""Application layer - fare calculation use cases."""

from train_fare.application.distance_lookup import TableDistanceLookup
from train_fare.application.fare_rules import apply_rule, apply_rules, parse_fare_amount
from train_fare.application.fare_session import InteractiveFareSession
from train_fare.application.services import AdditionalFee, FareCalculationService, FareSettings

__all__ = [
    "AdditionalFee",
    "FareCalculationService",
    "FareSettings",
    "InteractiveFareSession",
    "TableDistanceLookup",
    "apply_rule",
    "apply_rules",
    "parse_fare_amount",
]
