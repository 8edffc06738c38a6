"""Fare quote domain model."""

from dataclasses import dataclass, field

from train_fare.domain.models.fare_rule import DistanceRule, OtherRule, VipRule
from train_fare.domain.models.fare_step import FareStep


@dataclass(frozen=True)
class FareQuote:
    """A computed fare between two stations with its breakdown."""

    origin: str
    destination: str
    distance_km: float
    base_fare: float
    steps: tuple[FareStep, ...] = field(default_factory=tuple)

    @property
    def total(self) -> float:
        """Final fare: the output of the last applied rule, or the base fare."""
        if not self.steps:
            return self.base_fare
        return self.steps[-1].amount_after

    @property
    def distance_fare(self) -> float:
        """Fare after the distance rule, before any discount or extra fee."""
        for step in self.steps:
            if isinstance(step.rule, DistanceRule):
                return step.amount_after
        return self.base_fare

    @property
    def vip_step(self) -> FareStep | None:
        """The VIP discount step, if one was applied."""
        return next((s for s in self.steps if isinstance(s.rule, VipRule)), None)

    @property
    def other_step(self) -> FareStep | None:
        """The additional fee step, if one was applied."""
        return next((s for s in self.steps if isinstance(s.rule, OtherRule)), None)
