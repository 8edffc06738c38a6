"""Fare rule domain models.

A fare rule is one step of the fare pipeline. Each variant carries its own
parameters; the pipeline dispatches on the variant type.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DistanceRule:
    """Charge the travelled distance on top of the base fare."""

    distance_km: float
    increment_rate: float  # yuan per km


@dataclass(frozen=True)
class VipRule:
    """Multiply the running total by a discount factor."""

    discount_factor: float


@dataclass(frozen=True)
class OtherRule:
    """Add a named, ad-hoc fee to the running total."""

    name: str
    additional_fare: float


FareRule = DistanceRule | VipRule | OtherRule
