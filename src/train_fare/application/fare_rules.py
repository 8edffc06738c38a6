"""Fare rule pipeline.

Each rule is a pure function of the running total. Rules are applied in the
order given; the output of one rule is the input of the next.
"""

import logging
import math

from train_fare.domain.errors import InvalidFareAmountError
from train_fare.domain.models import DistanceRule, FareRule, FareStep, OtherRule, VipRule

logger = logging.getLogger(__name__)


def apply_rule(rule: FareRule, amount: float) -> float:
    """Apply a single fare rule to the running total."""
    match rule:
        case DistanceRule(distance_km=distance_km, increment_rate=increment_rate):
            return amount + distance_km * increment_rate
        case VipRule(discount_factor=discount_factor):
            return amount * discount_factor
        case OtherRule(additional_fare=additional_fare):
            return amount + additional_fare
        case _:
            raise TypeError(f"Unsupported fare rule: {rule!r}")


def apply_rules(rules: list[FareRule], base_fare: float) -> list[FareStep]:
    """Thread the running total through the rules and record each step."""
    steps: list[FareStep] = []
    amount = base_fare
    for rule in rules:
        result = apply_rule(rule, amount)
        logger.debug(f"{type(rule).__name__}: {amount:.2f} -> {result:.2f}")
        steps.append(FareStep(rule=rule, amount_before=amount, amount_after=result))
        amount = result
    return steps


def parse_fare_amount(text: str) -> float:
    """Parse a fee typed by the user.

    Raises:
        InvalidFareAmountError: If the text is not a finite number.
    """
    value = text.strip()
    try:
        amount = float(value)
    except ValueError as e:
        raise InvalidFareAmountError(text) from e
    if not math.isfinite(amount):
        raise InvalidFareAmountError(text)
    return amount
