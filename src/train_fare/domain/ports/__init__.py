"""Ports (interfaces) for the ports-and-adapters architecture."""

from train_fare.domain.ports.distance_lookup import DistanceLookup
from train_fare.domain.ports.fare_prompter import FarePrompter

__all__ = [
    "DistanceLookup",
    "FarePrompter",
]
