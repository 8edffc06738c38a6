"""Fare step domain model."""

from dataclasses import dataclass

from train_fare.domain.models.fare_rule import FareRule


@dataclass(frozen=True)
class FareStep:
    """Result of applying a single fare rule to a running total."""

    rule: FareRule
    amount_before: float
    amount_after: float
