"""Application services (use cases) for fare calculation."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from train_fare.application.fare_rules import apply_rules
from train_fare.domain.errors import StationNotFoundError
from train_fare.domain.models import DistanceRule, FareQuote, FareRule, OtherRule, VipRule

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from train_fare.domain.ports import DistanceLookup


@dataclass(frozen=True)
class FareSettings:
    """Fare constants used by the calculation service."""

    base_fare: float = 3.0
    increment_rate: float = 0.5
    vip_discount: float = 0.8


@dataclass(frozen=True)
class AdditionalFee:
    """A named fee the user wants to add on top of the fare."""

    name: str
    amount: float


class FareCalculationService:
    """Service computing fare quotes between two stations."""

    def __init__(self, distance_lookup: "DistanceLookup", settings: FareSettings) -> None:
        """Initialize with a distance lookup and the fare constants."""
        self._distance_lookup = distance_lookup
        self._settings = settings

    @property
    def settings(self) -> FareSettings:
        return self._settings

    def quote(
        self,
        origin: str,
        destination: str,
        vip: bool = False,
        other_fee: AdditionalFee | None = None,
    ) -> FareQuote:
        """Compute the fare from origin to destination.

        The distance rule is always applied; the VIP discount and the
        additional fee are applied afterwards, in that order, when requested.

        Raises:
            StationNotFoundError: If either station is unknown.
        """
        distance_km = self._distance_lookup.distance(origin, destination)

        rules: list[FareRule] = [
            DistanceRule(distance_km=distance_km, increment_rate=self._settings.increment_rate)
        ]
        if vip:
            rules.append(VipRule(discount_factor=self._settings.vip_discount))
        if other_fee is not None:
            rules.append(OtherRule(name=other_fee.name, additional_fare=other_fee.amount))

        steps = apply_rules(rules, self._settings.base_fare)
        quote = FareQuote(
            origin=origin,
            destination=destination,
            distance_km=distance_km,
            base_fare=self._settings.base_fare,
            steps=tuple(steps),
        )
        logger.info(
            f"Quote {origin} -> {destination}: {distance_km:.1f} km, {len(steps)} rule(s), total {quote.total:.2f}"
        )
        return quote

    def require_station(self, station_id: str) -> str:
        """Return the station id if the distance table knows it.

        Raises:
            StationNotFoundError: If the station is unknown.
        """
        station_ids = self._distance_lookup.station_ids()
        if station_id not in station_ids:
            raise StationNotFoundError(station_id, station_ids)
        return station_id

    def extend_quote(self, quote: FareQuote, rule: FareRule) -> FareQuote:
        """Apply one more rule to an existing quote."""
        step = apply_rules([rule], quote.total)[0]
        return FareQuote(
            origin=quote.origin,
            destination=quote.destination,
            distance_km=quote.distance_km,
            base_fare=quote.base_fare,
            steps=(*quote.steps, step),
        )
