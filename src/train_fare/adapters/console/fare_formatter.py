"""Fare formatting for console output."""

from typing import Any

from train_fare.domain.models import DistanceRule, FareQuote, FareRule, FareStep, OtherRule, VipRule


class FareFormatter:
    """Formats fare quotes as console text or JSON-ready dicts."""

    def format_amount(self, amount: float) -> str:
        """Format an amount with two decimals."""
        return f"{amount:.2f}"

    def format_distance(self, distance_km: float) -> str:
        """Format a distance with one decimal."""
        return f"{distance_km:.1f}"

    def format_distance_fare(self, quote: FareQuote) -> str:
        return (
            f"From {quote.origin} to {quote.destination}, distance {self.format_distance(quote.distance_km)}KM, "
            f"car fare is: {self.format_amount(quote.distance_fare)} yuan"
        )

    def format_vip_fare(self, quote: FareQuote) -> str:
        match quote.vip_step:
            case FareStep(rule=VipRule(discount_factor=factor), amount_after=amount):
                return (
                    f"From {quote.origin} to {quote.destination}, enjoy a {factor:g} discount, "
                    f"the car fare is: {self.format_amount(amount)} yuan"
                )
            case _:
                return self.format_distance_fare(quote)

    def format_total_fare(self, quote: FareQuote) -> str:
        text = (
            f"From {quote.origin} to {quote.destination}, car fare is: "
            f"{self.format_amount(quote.total)} yuan"
        )
        match quote.other_step:
            case FareStep(rule=OtherRule(name=name, additional_fare=fare)):
                text += f" (including {name or 'other fee'}: {self.format_amount(fare)} yuan)"
        return text

    def format_quote(self, quote: FareQuote) -> str:
        """Format a full quote with one line per applied rule."""
        lines = [
            f"From {quote.origin} to {quote.destination}, distance {self.format_distance(quote.distance_km)}KM",
            f"  Base fare: {self.format_amount(quote.base_fare)} yuan",
        ]
        for step in quote.steps:
            lines.append(f"  {self._describe_rule(step.rule)}: {self.format_amount(step.amount_after)} yuan")
        lines.append(f"Total fare: {self.format_amount(quote.total)} yuan")
        return "\n".join(lines)

    def quote_to_dict(self, quote: FareQuote) -> dict[str, Any]:
        """Convert a quote to a dict suitable for JSON output."""
        return {
            "origin": quote.origin,
            "destination": quote.destination,
            "distance_km": round(quote.distance_km, 3),
            "base_fare": round(quote.base_fare, 2),
            "steps": [
                {
                    "rule": self._rule_kind(step.rule),
                    "description": self._describe_rule(step.rule),
                    "amount_before": round(step.amount_before, 2),
                    "amount_after": round(step.amount_after, 2),
                }
                for step in quote.steps
            ],
            "total": round(quote.total, 2),
        }

    def _rule_kind(self, rule: FareRule) -> str:
        match rule:
            case DistanceRule():
                return "distance"
            case VipRule():
                return "vip"
            case OtherRule():
                return "other"
            case _:
                return type(rule).__name__

    def _describe_rule(self, rule: FareRule) -> str:
        match rule:
            case DistanceRule(distance_km=distance_km, increment_rate=rate):
                return f"Distance {self.format_distance(distance_km)}KM x {self.format_amount(rate)} yuan/KM"
            case VipRule(discount_factor=factor):
                return f"VIP discount x{factor:g}"
            case OtherRule(name=name, additional_fare=fare):
                return f"{name or 'Other fee'} +{self.format_amount(fare)}"
            case _:
                return type(rule).__name__
